"""Capa API: conectores HTTP y builders de payload."""
