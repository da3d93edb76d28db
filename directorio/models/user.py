"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Registro de la tabla de usuarios."""

    id: str
    nombre: str
    email: str


@dataclass(frozen=True, slots=True)
class UserDraft:
    """Estado transitorio del formulario de alta/edición.

    Attributes
    ----------
    nombre, email:
        Valores tal como los escribió el usuario en el diálogo.
    editando:
        Registro existente que se está modificando. ``None`` indica un alta.
    """

    nombre: str = ""
    email: str = ""
    editando: User | None = None

    @classmethod
    def desde_usuario(cls, usuario: User) -> "UserDraft":
        """Prepara un borrador con los datos actuales de ``usuario``."""

        return cls(nombre=usuario.nombre, email=usuario.email, editando=usuario)

    @property
    def es_edicion(self) -> bool:
        return self.editando is not None


__all__ = ["User", "UserDraft"]
