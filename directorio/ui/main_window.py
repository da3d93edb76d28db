"""Ventana principal de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QCloseEvent, QColor
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from directorio.core.auth import AuthService, AuthSession
from directorio.core.services import ResultadoMutacion, UserService, validar_borrador
from directorio.core.state import AppState
from directorio.errors import DirectorioError, ValidationError
from directorio.models.user import User, UserDraft
from directorio.ui.user_dialog import UserDialog
from directorio.ui.workers import TaskRunner


@dataclass(slots=True)
class _TableColumns:
    nombre: int = 0
    email: int = 1
    acciones: int = 2


class MainWindow(QMainWindow):
    """Directorio con búsqueda, paginación y alta/edición/baja de usuarios."""

    sesion_cerrada = pyqtSignal()
    ventana_cerrada = pyqtSignal()

    TOAST_MS = 4000
    TOAST_OK_STYLE = "background-color: #dcfce7; color: #166534; font-weight: 600;"
    TOAST_ERROR_STYLE = "background-color: #fee2e2; color: #991b1b; font-weight: 600;"

    def __init__(
        self,
        *,
        state: AppState,
        user_service: UserService,
        auth_service: AuthService,
        session: Optional[AuthSession] = None,
    ) -> None:
        super().__init__()
        self.state = state
        self.user_service = user_service
        self.auth_service = auth_service
        self.session = session
        self._columns = _TableColumns()
        self._runner = TaskRunner(self)
        self._dialogo: UserDialog | None = None
        self._mensaje_exito = ""

        self.setWindowTitle("Directorio de usuarios")
        self.resize(760, 480)

        titulo = QLabel("Directorio de usuarios")
        titulo.setStyleSheet("font-size: 18pt; font-weight: 700;")

        self.lbl_sesion = QLabel(session.email if session else "")
        self.lbl_sesion.setStyleSheet("color: #6b7280;")

        self.btn_logout = QPushButton("Cerrar sesión")
        self.btn_logout.setObjectName("dangerButton")
        self.btn_logout.clicked.connect(self._on_logout)

        self.search_box = QLineEdit(placeholderText="Buscar por nombre o email...")
        self.search_box.textChanged.connect(self._on_search_changed)

        self.btn_agregar = QPushButton("Agregar usuario")
        self.btn_agregar.clicked.connect(self._on_agregar)

        self.table = QTableWidget(columnCount=3)
        self.table.setHorizontalHeaderLabels(["Nombre", "Email", "Acciones"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)

        self.btn_anterior = QPushButton("Anterior")
        self.btn_anterior.clicked.connect(self._on_pagina_anterior)
        self.lbl_pagina = QLabel()
        self.lbl_pagina.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.btn_siguiente = QPushButton("Siguiente")
        self.btn_siguiente.clicked.connect(self._on_pagina_siguiente)

        header = QHBoxLayout()
        header.addWidget(titulo)
        header.addStretch(1)
        header.addWidget(self.lbl_sesion)
        header.addWidget(self.btn_logout)

        top_bar = QHBoxLayout()
        top_bar.addWidget(self.search_box, 1)
        top_bar.addStretch(1)
        top_bar.addWidget(self.btn_agregar)

        paginacion = QHBoxLayout()
        paginacion.addWidget(self.btn_anterior)
        paginacion.addStretch(1)
        paginacion.addWidget(self.lbl_pagina)
        paginacion.addStretch(1)
        paginacion.addWidget(self.btn_siguiente)

        layout = QVBoxLayout()
        layout.addLayout(header)
        layout.addLayout(top_bar)
        layout.addWidget(self.table)
        layout.addLayout(paginacion)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)
        self._apply_styles()

        self._render()
        self._reload_data()

    # ------------------------------------------------------------------
    # Carga de datos
    # ------------------------------------------------------------------
    def _reload_data(self) -> None:
        """Recarga los usuarios desde el servicio y refresca la tabla."""

        self.statusBar().showMessage("Cargando usuarios...")
        self._runner.ejecutar(
            self.user_service.cargar, self._on_usuarios_cargados, self._on_carga_fallida
        )

    def _on_usuarios_cargados(self, usuarios: list[User]) -> None:
        self.statusBar().clearMessage()
        self._aplicar_usuarios(usuarios)

    def _on_carga_fallida(self, exc: DirectorioError) -> None:
        self._toast(exc.message, error=True)

    def _aplicar_usuarios(self, usuarios: list[User]) -> None:
        self.state = self.state.con_usuarios(usuarios)
        self._render()

    def _aplicar_resultado(self, resultado: ResultadoMutacion) -> None:
        if resultado.error_recarga is not None:
            self._toast(resultado.error_recarga.message, error=True)
        elif resultado.usuarios is not None:
            self._aplicar_usuarios(resultado.usuarios)

    # ------------------------------------------------------------------
    # Búsqueda y paginación
    # ------------------------------------------------------------------
    def _on_search_changed(self, text: str) -> None:
        self.state = self.state.con_busqueda(text)
        self._render()

    def _on_pagina_anterior(self) -> None:
        self.state = self.state.pagina_anterior()
        self._render()

    def _on_pagina_siguiente(self) -> None:
        self.state = self.state.pagina_siguiente()
        self._render()

    # ------------------------------------------------------------------
    # Alta y edición
    # ------------------------------------------------------------------
    def _on_agregar(self) -> None:
        self._abrir_formulario(UserDraft())

    def _on_editar(self, usuario: User) -> None:
        self._abrir_formulario(UserDraft.desde_usuario(usuario))

    def _abrir_formulario(self, borrador: UserDraft) -> None:
        dialogo = UserDialog(borrador, self)
        dialogo.btn_guardar.clicked.connect(self._on_guardar)
        self._dialogo = dialogo
        dialogo.exec()
        self._dialogo = None
        dialogo.deleteLater()

    def _on_guardar(self) -> None:
        dialogo = self._dialogo
        if dialogo is None:
            return

        borrador = dialogo.borrador()
        try:
            validar_borrador(borrador)
        except ValidationError as exc:
            QMessageBox.warning(dialogo, "Datos inválidos", exc.message)
            return

        self._mensaje_exito = (
            "Usuario actualizado correctamente"
            if borrador.es_edicion
            else "Usuario agregado correctamente"
        )
        dialogo.set_ocupado(True)
        self._runner.ejecutar(
            partial(self.user_service.guardar, borrador),
            self._on_guardado,
            self._on_guardado_fallido,
        )

    def _on_guardado(self, resultado: ResultadoMutacion) -> None:
        if self._dialogo is not None:
            self._dialogo.accept()
        self._toast(self._mensaje_exito)
        self._aplicar_resultado(resultado)

    def _on_guardado_fallido(self, exc: DirectorioError) -> None:
        if self._dialogo is not None:
            self._dialogo.set_ocupado(False)
            QMessageBox.warning(self._dialogo, "Guardar usuario", exc.message)
        else:
            self._toast(exc.message, error=True)

    # ------------------------------------------------------------------
    # Baja
    # ------------------------------------------------------------------
    def _on_eliminar(self, usuario: User) -> None:
        if not self._confirmar_eliminacion(usuario):
            return
        self._runner.ejecutar(
            partial(self.user_service.eliminar, usuario.id, lambda: True),
            self._on_eliminado,
            self._on_eliminacion_fallida,
        )

    def _confirmar_eliminacion(self, usuario: User) -> bool:
        respuesta = QMessageBox.question(
            self,
            "Eliminar usuario",
            f"¿Seguro que deseas eliminar a {usuario.nombre}?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return respuesta == QMessageBox.StandardButton.Yes

    def _on_eliminado(self, resultado: Optional[ResultadoMutacion]) -> None:
        if resultado is not None:
            self._aplicar_resultado(resultado)

    def _on_eliminacion_fallida(self, exc: DirectorioError) -> None:
        QMessageBox.critical(self, "Eliminar usuario", exc.message)

    # ------------------------------------------------------------------
    # Sesión
    # ------------------------------------------------------------------
    def _on_logout(self) -> None:
        self.btn_logout.setEnabled(False)
        self._runner.ejecutar(
            self.auth_service.cerrar_sesion, self._on_logout_completed, self._on_logout_failed
        )

    def _on_logout_completed(self, _resultado: object) -> None:
        self.sesion_cerrada.emit()
        self.close()

    def _on_logout_failed(self, exc: DirectorioError) -> None:
        QMessageBox.warning(self, "Cerrar sesión", exc.message)
        self._on_logout_completed(None)

    def closeEvent(self, event: QCloseEvent) -> None:
        super().closeEvent(event)
        self.ventana_cerrada.emit()

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _render(self) -> None:
        vista = self.state.vista()
        self._populate_table(list(vista.registros))
        self.lbl_pagina.setText(f"Página {vista.pagina} de {vista.total_paginas}")
        self.btn_anterior.setEnabled(vista.puede_anterior)
        self.btn_siguiente.setEnabled(vista.puede_siguiente)

    def _populate_table(self, usuarios: list[User]) -> None:
        self.table.clearSpans()
        self.table.clearContents()

        if not usuarios:
            self.table.setRowCount(1)
            self.table.setSpan(0, 0, 1, 3)
            vacio = QTableWidgetItem("No se encontraron usuarios.")
            vacio.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            vacio.setForeground(QBrush(QColor("#6b7280")))
            self.table.setItem(0, 0, vacio)
            return

        self.table.setRowCount(len(usuarios))
        for row, usuario in enumerate(usuarios):
            nombre_item = QTableWidgetItem(usuario.nombre)
            email_item = QTableWidgetItem(usuario.email)

            self.table.setItem(row, self._columns.nombre, nombre_item)
            self.table.setItem(row, self._columns.email, email_item)
            self.table.setCellWidget(row, self._columns.acciones, self._acciones_widget(usuario))

        self.table.resizeColumnsToContents()

    def _acciones_widget(self, usuario: User) -> QWidget:
        btn_editar = QPushButton("Editar")
        btn_editar.setObjectName("linkButton")
        btn_editar.clicked.connect(lambda _checked=False, u=usuario: self._on_editar(u))

        btn_eliminar = QPushButton("Eliminar")
        btn_eliminar.setObjectName("linkDangerButton")
        btn_eliminar.clicked.connect(lambda _checked=False, u=usuario: self._on_eliminar(u))

        layout = QHBoxLayout()
        layout.setContentsMargins(4, 0, 4, 0)
        layout.addWidget(btn_editar)
        layout.addWidget(btn_eliminar)
        layout.addStretch(1)

        widget = QWidget()
        widget.setLayout(layout)
        return widget

    def _toast(self, mensaje: str, *, error: bool = False) -> None:
        self.statusBar().setStyleSheet(self.TOAST_ERROR_STYLE if error else self.TOAST_OK_STYLE)
        self.statusBar().showMessage(mensaje, self.TOAST_MS)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QLineEdit {
                border: 1px solid #d1d5db;
                border-radius: 6px;
                padding: 7px 9px;
            }
            QLineEdit:focus {
                border: 2px solid #3b82f6;
            }
            QPushButton {
                background: #2563eb;
                color: #fff;
                border: none;
                border-radius: 6px;
                padding: 7px 16px;
            }
            QPushButton:hover {
                background: #1d4ed8;
            }
            QPushButton:disabled {
                background: #d1d5db;
                color: #6b7280;
            }
            #dangerButton {
                background: #dc2626;
            }
            #dangerButton:hover {
                background: #b91c1c;
            }
            #linkButton, #linkDangerButton {
                background: transparent;
                padding: 2px 4px;
            }
            #linkButton {
                color: #2563eb;
            }
            #linkDangerButton {
                color: #dc2626;
            }
            QHeaderView::section {
                background: #2563eb;
                color: #fff;
                padding: 6px;
                border: none;
            }
            """
        )


__all__ = ["MainWindow"]
