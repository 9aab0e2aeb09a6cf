"""Infraestructura concreta (IO) de la librería."""
