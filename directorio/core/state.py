"""Estado de la vista del directorio.

``AppState`` es inmutable: cada manejador de la interfaz recibe el estado
actual y lo reemplaza por el que devuelve la transición correspondiente.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from directorio.core.view import (
    VistaDerivada,
    acotar_pagina,
    calcular_vista,
    contar_paginas,
    filtrar_usuarios,
)
from directorio.models.user import User


@dataclass(frozen=True, slots=True)
class AppState:
    """Usuarios descargados, texto de búsqueda y página actual."""

    usuarios: Tuple[User, ...] = ()
    busqueda: str = ""
    pagina: int = 1
    tamano_pagina: int = 5

    @property
    def total_paginas(self) -> int:
        filtrados = filtrar_usuarios(self.usuarios, self.busqueda)
        return contar_paginas(len(filtrados), self.tamano_pagina)

    def con_usuarios(self, usuarios: Iterable[User]) -> "AppState":
        """Reemplaza el listado y mantiene la página dentro del rango."""

        nuevo = replace(self, usuarios=tuple(usuarios))
        return nuevo.ir_a_pagina(nuevo.pagina)

    def con_busqueda(self, texto: str) -> "AppState":
        return replace(self, busqueda=texto, pagina=1)

    def ir_a_pagina(self, pagina: int) -> "AppState":
        return replace(self, pagina=acotar_pagina(pagina, self.total_paginas))

    def pagina_anterior(self) -> "AppState":
        return self.ir_a_pagina(self.pagina - 1)

    def pagina_siguiente(self) -> "AppState":
        return self.ir_a_pagina(self.pagina + 1)

    def vista(self) -> VistaDerivada:
        return calcular_vista(self.usuarios, self.busqueda, self.pagina, self.tamano_pagina)


__all__ = ["AppState"]
