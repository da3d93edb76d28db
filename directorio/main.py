"""Punto de entrada de la aplicación.

Lee la configuración, crea el cliente del backend, los servicios y el estado,
y alterna entre el diálogo de acceso y la ventana del directorio hasta que el
usuario cierra la aplicación.
"""

from __future__ import annotations

import sys

from loguru import logger
from PyQt6.QtWidgets import QApplication, QDialog, QMessageBox

from directorio.config import Settings, cargar_configuracion, configurar_logging
from directorio.core.auth import AuthService
from directorio.core.services import UserService
from directorio.core.state import AppState
from directorio.errors import ConfigError
from directorio.infrastructure.api_client import APIClient
from directorio.infrastructure.repositories import UserRepository
from directorio.ui.login_dialog import LoginDialog
from directorio.ui.main_window import MainWindow


def _ejecutar_sesiones(app: QApplication, settings: Settings, api_client: APIClient) -> int:
    auth_service = AuthService(api_client)
    user_service = UserService(UserRepository(api_client))

    while True:
        login = LoginDialog(auth_service)
        if login.exec() != QDialog.DialogCode.Accepted or not login.session:
            return 0

        cierre = {"logout": False}
        window = MainWindow(
            state=AppState(tamano_pagina=settings.tamano_pagina),
            user_service=user_service,
            auth_service=auth_service,
            session=login.session,
        )
        window.sesion_cerrada.connect(lambda: cierre.update(logout=True))
        window.ventana_cerrada.connect(app.quit)
        window.show()
        codigo = app.exec()
        window.deleteLater()

        if not cierre["logout"]:
            return codigo
        logger.debug("Volviendo a la pantalla de acceso")


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setQuitOnLastWindowClosed(False)

    try:
        settings = cargar_configuracion()
        api_client = APIClient(
            settings.supabase_url, settings.supabase_key, tabla=settings.tabla
        )
    except ConfigError as exc:
        QMessageBox.critical(None, "Configuración", exc.message)
        sys.exit(1)

    configurar_logging(settings.log_level)
    logger.info("Conectando a {} (tabla {})", settings.supabase_url, settings.tabla)

    sys.exit(_ejecutar_sesiones(app, settings, api_client))


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
