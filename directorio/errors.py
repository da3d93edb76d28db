"""Jerarquía de errores de la aplicación.

Ningún error es fatal para el proceso: cada uno termina la acción que lo
originó y se muestra al usuario.
"""

from __future__ import annotations


class DirectorioError(Exception):
    """Error base con un mensaje listo para mostrar en la interfaz."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DirectorioError):
    """Datos del formulario incompletos o con formato inválido."""


class PersistenceError(DirectorioError):
    """El almacén de registros devolvió un error."""


class AuthError(DirectorioError):
    """El proveedor de sesiones rechazó la operación."""


class ConfigError(DirectorioError):
    """Configuración ausente o inválida al arrancar."""


__all__ = [
    "AuthError",
    "ConfigError",
    "DirectorioError",
    "PersistenceError",
    "ValidationError",
]
