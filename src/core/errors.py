"""Taxonomía de errores del pipeline de generación.

Ninguno de estos errores cruza el orquestador: el cliente los devuelve dentro
de un `NoResult` y extracción/parseo se capturan en el borde del orquestador.
"""

from __future__ import annotations


class FitgenError(Exception):
    """Base de todos los errores propios."""


class ConfigurationError(FitgenError):
    """Credencial ausente o placeholder: el cliente remoto queda deshabilitado."""


class TransportFailure(FitgenError):
    """Red, timeout, status no-2xx, cuerpo vacío o payload de error explícito."""


class ExtractionError(FitgenError):
    """No se encontró un objeto JSON delimitado por llaves en el texto."""


class ParseError(FitgenError):
    """JSON inválido o que no encaja con el esquema del dominio."""
