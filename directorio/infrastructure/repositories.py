"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from directorio.infrastructure.api_client import APIClient
from directorio.models.user import User


class UserRepository:
    """Repositorio de usuarios basado en un cliente API.

    Traduce entre las columnas de la tabla (``id``, ``name``, ``email``) y la
    entidad :class:`User`.
    """

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def obtener_usuarios(self) -> list[User]:
        """Devuelve la lista completa de usuarios."""

        usuarios_crudos = self._api_client.seleccionar_usuarios()
        return [
            User(
                id=str(datos["id"]),
                nombre=datos.get("name") or "",
                email=datos.get("email") or "",
            )
            for datos in usuarios_crudos
        ]

    def crear(self, nombre: str, email: str) -> None:
        self._api_client.insertar_usuario({"name": nombre, "email": email})

    def actualizar(self, user_id: str, nombre: str, email: str) -> None:
        self._api_client.actualizar_usuario(user_id, {"name": nombre, "email": email})

    def eliminar(self, user_id: str) -> None:
        self._api_client.eliminar_usuario(user_id)


__all__ = ["UserRepository"]
