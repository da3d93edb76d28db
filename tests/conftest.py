"""Dobles de prueba compartidos: repositorio y cliente API en memoria."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Optional

import pytest

from directorio.errors import AuthError, PersistenceError
from directorio.models.user import User


def crear_usuarios(cantidad: int) -> list[User]:
    return [
        User(id=f"id-{i}", nombre=f"Usuario {i}", email=f"usuario{i}@example.com")
        for i in range(1, cantidad + 1)
    ]


class FakeRepository:
    """Repositorio en memoria que registra cada llamada recibida."""

    def __init__(self, usuarios: Optional[list[User]] = None) -> None:
        self.usuarios = list(usuarios or [])
        self.llamadas: list[tuple] = []
        self.fallo: Optional[str] = None
        self.fallo_carga: Optional[str] = None
        self._siguiente_id = 100

    def obtener_usuarios(self) -> list[User]:
        self.llamadas.append(("obtener",))
        if self.fallo_carga:
            raise PersistenceError(self.fallo_carga)
        return list(self.usuarios)

    def crear(self, nombre: str, email: str) -> None:
        self.llamadas.append(("crear", nombre, email))
        self._fallar_si_corresponde()
        self._siguiente_id += 1
        self.usuarios.append(User(id=f"id-{self._siguiente_id}", nombre=nombre, email=email))

    def actualizar(self, user_id: str, nombre: str, email: str) -> None:
        self.llamadas.append(("actualizar", user_id, nombre, email))
        self._fallar_si_corresponde()
        self.usuarios = [
            User(id=u.id, nombre=nombre, email=email) if u.id == user_id else u
            for u in self.usuarios
        ]

    def eliminar(self, user_id: str) -> None:
        self.llamadas.append(("eliminar", user_id))
        self._fallar_si_corresponde()
        self.usuarios = [u for u in self.usuarios if u.id != user_id]

    @property
    def mutaciones(self) -> list[tuple]:
        return [llamada for llamada in self.llamadas if llamada[0] != "obtener"]

    def _fallar_si_corresponde(self) -> None:
        if self.fallo:
            raise PersistenceError(self.fallo)


class FakeAuthClient:
    """Sustituye a ``APIClient`` en las pruebas de sesiones."""

    def __init__(self) -> None:
        self.llamadas: list[tuple] = []
        self.fallo: Optional[str] = None
        self.sesion_registro = True
        self.sesion = None

    def _sesion(self, email: str) -> SimpleNamespace:
        return SimpleNamespace(
            access_token="token-123",
            user=SimpleNamespace(email=email),
        )

    def iniciar_sesion(self, email: str, password: str) -> SimpleNamespace:
        self.llamadas.append(("iniciar_sesion", email))
        if self.fallo:
            raise AuthError(self.fallo)
        self.sesion = self._sesion(email)
        return SimpleNamespace(session=self.sesion, user=self.sesion.user)

    def registrarse(self, email: str, password: str) -> SimpleNamespace:
        self.llamadas.append(("registrarse", email))
        if self.fallo:
            raise AuthError(self.fallo)
        if self.sesion_registro:
            self.sesion = self._sesion(email)
        return SimpleNamespace(session=self.sesion, user=SimpleNamespace(email=email))

    def cerrar_sesion(self) -> None:
        self.llamadas.append(("cerrar_sesion",))
        self.sesion = None

    def obtener_sesion(self):
        return self.sesion


@pytest.fixture
def repositorio() -> FakeRepository:
    return FakeRepository(
        [
            User(id="a1", nombre="Ann", email="a@x.com"),
            User(id="b2", nombre="Bob", email="b@x.com"),
        ]
    )


@pytest.fixture
def auth_client() -> FakeAuthClient:
    return FakeAuthClient()
