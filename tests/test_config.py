import pytest

from directorio.config import cargar_configuracion
from directorio.errors import ConfigError

BASE = {"SUPABASE_URL": "https://demo.supabase.co", "SUPABASE_KEY": "anon"}


def test_valores_por_defecto():
    settings = cargar_configuracion(BASE)

    assert settings.supabase_url == "https://demo.supabase.co"
    assert settings.tabla == "users"
    assert settings.tamano_pagina == 5
    assert settings.log_level == "INFO"


def test_valores_personalizados():
    settings = cargar_configuracion(
        {
            **BASE,
            "DIRECTORIO_TABLA": "personas",
            "DIRECTORIO_TAMANO_PAGINA": "10",
            "DIRECTORIO_LOG_LEVEL": "debug",
        }
    )

    assert settings.tabla == "personas"
    assert settings.tamano_pagina == 10
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("faltante", ["SUPABASE_URL", "SUPABASE_KEY"])
def test_credenciales_obligatorias(faltante):
    entorno = {clave: valor for clave, valor in BASE.items() if clave != faltante}

    with pytest.raises(ConfigError, match=faltante):
        cargar_configuracion(entorno)


@pytest.mark.parametrize("valor", ["cero", "0", "-3"])
def test_tamano_de_pagina_invalido(valor):
    with pytest.raises(ConfigError):
        cargar_configuracion({**BASE, "DIRECTORIO_TAMANO_PAGINA": valor})


def test_lee_el_entorno_del_proceso(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://otro.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "clave")
    monkeypatch.setenv("DIRECTORIO_TAMANO_PAGINA", "3")

    settings = cargar_configuracion(usar_dotenv=False)

    assert settings.supabase_url == "https://otro.supabase.co"
    assert settings.tamano_pagina == 3
