"""Metadatos opcionales de sesión: alta perezosa y limpieza por antigüedad."""

__version__ = "0.1.0"
