from types import SimpleNamespace

import httpx
import pytest
from supabase import AuthError as SupabaseAuthError
from supabase import PostgrestAPIError

from directorio.errors import AuthError, ConfigError, PersistenceError
from directorio.infrastructure.api_client import APIClient
from directorio.infrastructure.repositories import UserRepository
from directorio.models.user import User


class _FalloAuth(SupabaseAuthError):
    def __init__(self, message: str) -> None:
        Exception.__init__(self, message)
        self.message = message


class FakeQuery:
    def __init__(self, client, tabla):
        self.client = client
        self.operaciones = [("table", tabla)]

    def __getattr__(self, nombre):
        def registrar(*args):
            self.operaciones.append((nombre, *args))
            return self

        return registrar

    def execute(self):
        self.client.consultas.append(self.operaciones)
        if self.client.error is not None:
            raise self.client.error
        return SimpleNamespace(data=self.client.filas)


class FakeAuth:
    def __init__(self):
        self.error = None
        self.llamadas = []

    def sign_in_with_password(self, credenciales):
        self.llamadas.append(("sign_in", credenciales))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(session=SimpleNamespace(access_token="tok"))

    def sign_up(self, credenciales):
        self.llamadas.append(("sign_up", credenciales))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(session=None)

    def sign_out(self):
        self.llamadas.append(("sign_out",))

    def get_session(self):
        return None


class FakeSupabase:
    def __init__(self, filas=None):
        self.filas = filas if filas is not None else []
        self.error = None
        self.consultas = []
        self.auth = FakeAuth()

    def table(self, nombre):
        return FakeQuery(self, nombre)


@pytest.fixture
def supabase_client():
    return FakeSupabase(
        [
            {"id": "a1", "name": "Ann", "email": "a@x.com"},
            {"id": 7, "name": None, "email": "b@x.com"},
        ]
    )


@pytest.fixture
def api_client(supabase_client):
    return APIClient("https://demo.supabase.co", "anon", client=supabase_client)


def test_select_pide_solo_los_campos_necesarios(api_client, supabase_client):
    filas = api_client.seleccionar_usuarios()

    assert len(filas) == 2
    assert supabase_client.consultas == [[("table", "users"), ("select", "id, name, email")]]


def test_update_y_delete_filtran_por_id(api_client, supabase_client):
    api_client.actualizar_usuario("a1", {"name": "Ann", "email": "ann@x.com"})
    api_client.eliminar_usuario("a1")

    actualizar, eliminar = supabase_client.consultas
    assert actualizar[1:] == [("update", {"name": "Ann", "email": "ann@x.com"}), ("eq", "id", "a1")]
    assert eliminar[1:] == [("delete",), ("eq", "id", "a1")]


def test_insert_envia_una_lista(api_client, supabase_client):
    api_client.insertar_usuario({"name": "Carla", "email": "c@x.com"})

    assert supabase_client.consultas[0][1] == ("insert", [{"name": "Carla", "email": "c@x.com"}])


def test_tabla_configurable(supabase_client):
    cliente = APIClient("https://demo.supabase.co", "anon", tabla="personas", client=supabase_client)

    cliente.seleccionar_usuarios()

    assert supabase_client.consultas[0][0] == ("table", "personas")


def test_error_de_postgrest_se_traduce(api_client, supabase_client):
    supabase_client.error = PostgrestAPIError({"message": "permission denied for table users"})

    with pytest.raises(PersistenceError) as info:
        api_client.eliminar_usuario("a1")

    assert info.value.message == "permission denied for table users"


def test_error_de_red_se_traduce(api_client, supabase_client):
    supabase_client.error = httpx.ConnectError("connection refused")

    with pytest.raises(PersistenceError, match="No se pudo conectar"):
        api_client.seleccionar_usuarios()


def test_error_de_autenticacion_se_traduce(api_client, supabase_client):
    supabase_client.auth.error = _FalloAuth("Invalid login credentials")

    with pytest.raises(AuthError) as info:
        api_client.iniciar_sesion("a@x.com", "mal")

    assert info.value.message == "Invalid login credentials"


def test_credenciales_se_envian_al_proveedor(api_client, supabase_client):
    api_client.registrarse("a@x.com", "secreto")
    api_client.cerrar_sesion()

    assert supabase_client.auth.llamadas == [
        ("sign_up", {"email": "a@x.com", "password": "secreto"}),
        ("sign_out",),
    ]


def test_repositorio_mapea_columnas(api_client):
    usuarios = UserRepository(api_client).obtener_usuarios()

    assert usuarios == [
        User(id="a1", nombre="Ann", email="a@x.com"),
        User(id="7", nombre="", email="b@x.com"),
    ]


def test_repositorio_escribe_columnas_de_la_tabla(api_client, supabase_client):
    repositorio = UserRepository(api_client)

    repositorio.crear("Carla", "c@x.com")
    repositorio.actualizar("a1", "Ann", "ann@x.com")

    assert supabase_client.consultas[0][1] == ("insert", [{"name": "Carla", "email": "c@x.com"}])
    assert supabase_client.consultas[1][1] == ("update", {"name": "Ann", "email": "ann@x.com"})


@pytest.mark.parametrize("url, key", [("", "anon"), ("https://demo.supabase.co", "")])
def test_credenciales_invalidas_son_error_de_configuracion(url, key):
    with pytest.raises(ConfigError, match="mal configurada"):
        APIClient(url, key)
