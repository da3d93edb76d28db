"""Servicio de sesiones sobre el proveedor de autenticación."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from directorio.errors import AuthError
from directorio.infrastructure.api_client import APIClient


@dataclass(frozen=True, slots=True)
class AuthSession:
    """Mantiene la información de autenticación activa."""

    access_token: str
    email: str


def _convertir_sesion(sesion: Any) -> Optional[AuthSession]:
    if sesion is None or not getattr(sesion, "access_token", None):
        return None

    usuario = getattr(sesion, "user", None)
    email = getattr(usuario, "email", None) or ""
    return AuthSession(access_token=sesion.access_token, email=email)


class AuthService:
    """Inicio de sesión, registro y cierre de sesión."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def iniciar_sesion(self, email: str, password: str) -> AuthSession:
        email = self._validar_credenciales(email, password)
        respuesta = self._api_client.iniciar_sesion(email, password)
        sesion = _convertir_sesion(getattr(respuesta, "session", None))
        if sesion is None:
            raise AuthError("El servicio no devolvió una sesión.")
        logger.info("Sesión iniciada para {}", email)
        return sesion

    def registrarse(self, email: str, password: str) -> Optional[AuthSession]:
        """Crea la cuenta.

        Devuelve ``None`` cuando el backend exige confirmar el email antes de
        emitir una sesión.
        """

        email = self._validar_credenciales(email, password)
        respuesta = self._api_client.registrarse(email, password)
        sesion = _convertir_sesion(getattr(respuesta, "session", None))
        if sesion is None:
            logger.info("Cuenta {} creada; pendiente de confirmación", email)
        else:
            logger.info("Cuenta {} creada con sesión activa", email)
        return sesion

    def cerrar_sesion(self) -> None:
        self._api_client.cerrar_sesion()
        logger.info("Sesión cerrada")

    def sesion_actual(self) -> Optional[AuthSession]:
        return _convertir_sesion(self._api_client.obtener_sesion())

    @staticmethod
    def _validar_credenciales(email: str, password: str) -> str:
        email = email.strip()
        if not email or not password:
            raise AuthError("Email y contraseña son obligatorios.")
        return email


__all__ = ["AuthService", "AuthSession"]
