"""Cálculo de la vista derivada: filtro por texto y paginación.

Todas las funciones son puras. Reciben la lista completa de usuarios que se
descargó del almacén y devuelven nuevas estructuras sin modificar la entrada.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from directorio.models.user import User


@dataclass(frozen=True, slots=True)
class VistaDerivada:
    """Porción visible del directorio y metadatos de paginación.

    Attributes
    ----------
    registros:
        Usuarios de la página solicitada, en el orden original.
    total_paginas:
        Número de páginas del listado filtrado (0 si no hay coincidencias).
    total_filtrados:
        Cantidad de usuarios que pasaron el filtro.
    pagina:
        Página usada para calcular ``registros``.
    """

    registros: Tuple[User, ...]
    total_paginas: int
    total_filtrados: int
    pagina: int

    @property
    def puede_anterior(self) -> bool:
        return self.total_paginas > 0 and self.pagina > 1

    @property
    def puede_siguiente(self) -> bool:
        return self.total_paginas > 0 and self.pagina < self.total_paginas


def coincide(usuario: User, busqueda: str) -> bool:
    """Indica si ``busqueda`` aparece en el nombre o en el email."""

    consulta = busqueda.lower()
    return consulta in usuario.nombre.lower() or consulta in usuario.email.lower()


def filtrar_usuarios(usuarios: Sequence[User], busqueda: str) -> list[User]:
    """Filtra sin distinguir mayúsculas; una búsqueda vacía deja pasar todo."""

    if not busqueda:
        return list(usuarios)
    return [usuario for usuario in usuarios if coincide(usuario, busqueda)]


def contar_paginas(total: int, tamano_pagina: int) -> int:
    if tamano_pagina < 1:
        raise ValueError(f"tamano_pagina debe ser positivo: {tamano_pagina}")
    return math.ceil(total / tamano_pagina)


def acotar_pagina(pagina: int, total_paginas: int) -> int:
    """Lleva ``pagina`` al rango ``[1, total_paginas]`` (mínimo 1)."""

    return max(1, min(pagina, max(total_paginas, 1)))


def calcular_vista(
    usuarios: Sequence[User], busqueda: str, pagina: int, tamano_pagina: int
) -> VistaDerivada:
    """Devuelve la página ``pagina`` del listado filtrado por ``busqueda``.

    Una página fuera de rango produce una porción vacía; acotarla es
    responsabilidad del llamador (ver :func:`acotar_pagina`).
    """

    filtrados = filtrar_usuarios(usuarios, busqueda)
    total_paginas = contar_paginas(len(filtrados), tamano_pagina)

    if pagina < 1:
        registros: Tuple[User, ...] = ()
    else:
        inicio = (pagina - 1) * tamano_pagina
        registros = tuple(filtrados[inicio : inicio + tamano_pagina])

    return VistaDerivada(
        registros=registros,
        total_paginas=total_paginas,
        total_filtrados=len(filtrados),
        pagina=pagina,
    )


__all__ = [
    "VistaDerivada",
    "acotar_pagina",
    "calcular_vista",
    "coincide",
    "contar_paginas",
    "filtrar_usuarios",
]
