"""Configuración (settings y logging) de la librería."""
