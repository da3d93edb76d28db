"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from directorio.errors import PersistenceError, ValidationError
from directorio.infrastructure.repositories import UserRepository
from directorio.models.user import User, UserDraft

EMAIL_PATTERN = re.compile(r"^[\w\-.]+@([\w-]+\.)+[\w-]{2,4}$", re.ASCII)


def validar_borrador(borrador: UserDraft) -> tuple[str, str]:
    """Valida el formulario y devuelve ``(nombre, email)`` sin espacios extremos.

    Raises
    ------
    ValidationError
        Si falta algún campo o el email no tiene forma ``local@dominio.tld``.
    """

    nombre = borrador.nombre.strip()
    email = borrador.email.strip()

    if not nombre or not email:
        raise ValidationError("Completa el nombre y el email.")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Email inválido.")
    return nombre, email


@dataclass(frozen=True, slots=True)
class ResultadoMutacion:
    """Resultado de un alta, edición o baja ya aplicada en el almacén.

    Attributes
    ----------
    usuarios:
        Listado recargado tras la operación, o ``None`` si la recarga falló.
    error_recarga:
        Error de la recarga. La operación en sí se completó igualmente.
    """

    usuarios: Optional[list[User]] = None
    error_recarga: Optional[PersistenceError] = None


class UserService:
    """Orquesta el flujo de datos relacionado con usuarios.

    Cada operación que modifica el almacén termina con una recarga completa
    del listado. Un fallo de esa recarga no invalida la operación: se informa
    en el :class:`ResultadoMutacion` devuelto.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def cargar(self) -> list[User]:
        try:
            return self._repository.obtener_usuarios()
        except PersistenceError as exc:
            raise PersistenceError(f"Error al obtener los usuarios: {exc.message}") from exc

    def guardar(self, borrador: UserDraft) -> ResultadoMutacion:
        """Inserta o actualiza según ``borrador.editando`` y recarga."""

        nombre, email = validar_borrador(borrador)

        if borrador.editando is not None:
            user_id = borrador.editando.id
            try:
                self._repository.actualizar(user_id, nombre, email)
            except PersistenceError as exc:
                raise PersistenceError(
                    f"Error al actualizar el usuario: {exc.message}"
                ) from exc
            logger.info("Usuario {} actualizado", user_id)
        else:
            try:
                self._repository.crear(nombre, email)
            except PersistenceError as exc:
                raise PersistenceError(f"Error al agregar el usuario: {exc.message}") from exc
            logger.info("Usuario agregado: {}", email)

        return self._recargar()

    def eliminar(
        self, user_id: str, confirmar: Callable[[], bool]
    ) -> Optional[ResultadoMutacion]:
        """Elimina ``user_id`` si ``confirmar()`` lo acepta.

        Devuelve ``None`` si el usuario canceló.
        """

        if not confirmar():
            logger.debug("Eliminación de {} cancelada", user_id)
            return None

        try:
            self._repository.eliminar(user_id)
        except PersistenceError as exc:
            raise PersistenceError(f"Error al eliminar el usuario: {exc.message}") from exc
        logger.info("Usuario {} eliminado", user_id)
        return self._recargar()

    def _recargar(self) -> ResultadoMutacion:
        try:
            return ResultadoMutacion(usuarios=self.cargar())
        except PersistenceError as exc:
            logger.warning("Recarga tras la mutación fallida: {}", exc.message)
            return ResultadoMutacion(error_recarga=exc)


__all__ = ["EMAIL_PATTERN", "ResultadoMutacion", "UserService", "validar_borrador"]
