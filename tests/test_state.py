from conftest import crear_usuarios
from directorio.core.state import AppState


def test_cambiar_busqueda_reinicia_pagina():
    state = AppState(tamano_pagina=5).con_usuarios(crear_usuarios(12)).ir_a_pagina(3)
    assert state.pagina == 3

    nuevo = state.con_busqueda("usuario")

    assert nuevo.pagina == 1
    assert nuevo.busqueda == "usuario"


def test_transiciones_no_modifican_el_estado_original():
    state = AppState(tamano_pagina=5).con_usuarios(crear_usuarios(12))

    siguiente = state.pagina_siguiente()

    assert state.pagina == 1
    assert siguiente.pagina == 2


def test_navegacion_queda_dentro_del_rango():
    state = AppState(tamano_pagina=5).con_usuarios(crear_usuarios(12))

    assert state.pagina_anterior().pagina == 1
    assert state.ir_a_pagina(3).pagina_siguiente().pagina == 3


def test_recargar_con_menos_usuarios_acota_la_pagina():
    state = AppState(tamano_pagina=5).con_usuarios(crear_usuarios(12)).ir_a_pagina(3)

    recargado = state.con_usuarios(crear_usuarios(6))

    assert recargado.pagina == 2
    assert len(recargado.vista().registros) == 1


def test_listado_vacio_queda_en_pagina_uno():
    state = AppState(tamano_pagina=5).con_usuarios(crear_usuarios(8)).ir_a_pagina(2)

    vacio = state.con_usuarios([])

    assert vacio.pagina == 1
    assert vacio.total_paginas == 0
    assert vacio.vista().registros == ()


def test_vista_aplica_busqueda_y_pagina():
    state = (
        AppState(tamano_pagina=2)
        .con_usuarios(crear_usuarios(12))
        .con_busqueda("usuario1")
        .pagina_siguiente()
    )

    vista = state.vista()

    # usuario1, usuario10, usuario11, usuario12
    assert vista.total_paginas == 2
    assert [u.id for u in vista.registros] == ["id-11", "id-12"]
