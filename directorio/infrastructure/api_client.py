"""Cliente del backend (Supabase).

Encapsula el cliente ``supabase`` para que el resto de la aplicación trabaje
con diccionarios simples y con los errores propios del directorio. Las
excepciones de ``postgrest``, de la autenticación y de ``httpx`` se traducen a
``PersistenceError`` o ``AuthError`` con el mensaje original del servicio.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger
from supabase import AuthError as SupabaseAuthError
from supabase import Client, PostgrestAPIError, create_client
from supabase._sync.client import SupabaseException

from directorio.errors import AuthError, ConfigError, PersistenceError

CAMPOS_USUARIO = "id, name, email"


def _mensaje(exc: Exception) -> str:
    mensaje = getattr(exc, "message", None)
    return str(mensaje) if mensaje else str(exc)


class APIClient:
    """Acceso a la tabla de usuarios y al proveedor de sesiones."""

    def __init__(
        self,
        url: str,
        key: str,
        *,
        tabla: str = "users",
        client: Optional[Client] = None,
    ) -> None:
        self.tabla = tabla
        if client is None:
            try:
                client = create_client(url, key)
            except SupabaseException as exc:
                raise ConfigError(f"Conexión a Supabase mal configurada: {_mensaje(exc)}") from exc
        self._client = client

    # ------------------------------------------------------------------
    # Registros
    # ------------------------------------------------------------------
    def seleccionar_usuarios(self, campos: str = CAMPOS_USUARIO) -> list[dict]:
        """Devuelve todas las filas de la tabla con los campos indicados."""

        consulta = self._client.table(self.tabla).select(campos)
        respuesta = self._ejecutar(consulta, "select")
        return list(respuesta.data or [])

    def insertar_usuario(self, datos: dict) -> None:
        consulta = self._client.table(self.tabla).insert([datos])
        self._ejecutar(consulta, "insert")

    def actualizar_usuario(self, user_id: str, datos: dict) -> None:
        consulta = self._client.table(self.tabla).update(datos).eq("id", user_id)
        self._ejecutar(consulta, f"update id={user_id}")

    def eliminar_usuario(self, user_id: str) -> None:
        consulta = self._client.table(self.tabla).delete().eq("id", user_id)
        self._ejecutar(consulta, f"delete id={user_id}")

    def _ejecutar(self, consulta: Any, accion: str) -> Any:
        logger.debug("Supabase {}: {}", self.tabla, accion)
        try:
            return consulta.execute()
        except PostgrestAPIError as exc:
            logger.warning("Supabase {} {} falló: {}", self.tabla, accion, _mensaje(exc))
            raise PersistenceError(_mensaje(exc)) from exc
        except httpx.HTTPError as exc:
            logger.warning("Sin conexión con Supabase ({}): {}", accion, exc)
            raise PersistenceError(f"No se pudo conectar al servicio: {exc}") from exc

    # ------------------------------------------------------------------
    # Sesiones
    # ------------------------------------------------------------------
    def iniciar_sesion(self, email: str, password: str) -> Any:
        """Autentica con email y contraseña y devuelve la respuesta de auth."""

        logger.debug("Inicio de sesión para {}", email)
        try:
            return self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except (SupabaseAuthError, httpx.HTTPError) as exc:
            logger.warning("Inicio de sesión rechazado para {}: {}", email, _mensaje(exc))
            raise AuthError(_mensaje(exc)) from exc

    def registrarse(self, email: str, password: str) -> Any:
        logger.debug("Registro de cuenta para {}", email)
        try:
            return self._client.auth.sign_up({"email": email, "password": password})
        except (SupabaseAuthError, httpx.HTTPError) as exc:
            logger.warning("Registro rechazado para {}: {}", email, _mensaje(exc))
            raise AuthError(_mensaje(exc)) from exc

    def cerrar_sesion(self) -> None:
        try:
            self._client.auth.sign_out()
        except (SupabaseAuthError, httpx.HTTPError) as exc:
            raise AuthError(_mensaje(exc)) from exc

    def obtener_sesion(self) -> Any:
        """Sesión vigente del cliente, o ``None`` si no hay ninguna."""

        try:
            return self._client.auth.get_session()
        except (SupabaseAuthError, httpx.HTTPError) as exc:
            raise AuthError(_mensaje(exc)) from exc


__all__ = ["APIClient", "CAMPOS_USUARIO"]
