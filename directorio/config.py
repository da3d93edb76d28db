"""Configuración de la aplicación.

Los valores se leen de variables de entorno; un archivo ``.env`` en el
directorio de trabajo se carga antes con ``python-dotenv``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from directorio.errors import ConfigError

DEFAULT_TABLA = "users"
DEFAULT_TAMANO_PAGINA = 5
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class Settings:
    """Parámetros de conexión y de presentación."""

    supabase_url: str
    supabase_key: str
    tabla: str = DEFAULT_TABLA
    tamano_pagina: int = DEFAULT_TAMANO_PAGINA
    log_level: str = DEFAULT_LOG_LEVEL


def cargar_configuracion(
    entorno: Optional[Mapping[str, str]] = None, *, usar_dotenv: bool = True
) -> Settings:
    """Construye ``Settings`` desde ``entorno`` (por defecto ``os.environ``)."""

    if entorno is None:
        if usar_dotenv:
            load_dotenv()
        entorno = os.environ

    url = entorno.get("SUPABASE_URL", "").strip()
    key = entorno.get("SUPABASE_KEY", "").strip()
    faltantes = [
        nombre
        for nombre, valor in (("SUPABASE_URL", url), ("SUPABASE_KEY", key))
        if not valor
    ]
    if faltantes:
        raise ConfigError(f"Faltan variables de entorno: {', '.join(faltantes)}.")

    tabla = entorno.get("DIRECTORIO_TABLA", "").strip() or DEFAULT_TABLA

    texto_tamano = entorno.get("DIRECTORIO_TAMANO_PAGINA", "").strip()
    if texto_tamano:
        try:
            tamano_pagina = int(texto_tamano)
        except ValueError:
            raise ConfigError(
                f"DIRECTORIO_TAMANO_PAGINA debe ser un entero: {texto_tamano!r}."
            ) from None
        if tamano_pagina < 1:
            raise ConfigError("DIRECTORIO_TAMANO_PAGINA debe ser mayor que cero.")
    else:
        tamano_pagina = DEFAULT_TAMANO_PAGINA

    log_level = entorno.get("DIRECTORIO_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL

    return Settings(
        supabase_url=url,
        supabase_key=key,
        tabla=tabla,
        tamano_pagina=tamano_pagina,
        log_level=log_level,
    )


def configurar_logging(nivel: str = DEFAULT_LOG_LEVEL) -> None:
    """Redirige loguru a stderr con el nivel indicado."""

    logger.remove()
    logger.add(sys.stderr, level=nivel)


__all__ = ["Settings", "cargar_configuracion", "configurar_logging"]
