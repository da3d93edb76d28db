"""Diálogo de inicio de sesión y registro contra Supabase Auth."""

from __future__ import annotations

from functools import partial
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from directorio.core.auth import AuthService, AuthSession
from directorio.errors import DirectorioError
from directorio.ui.workers import TaskRunner


class LoginDialog(QDialog):
    """Pantalla modal de autenticación con alternancia login/registro."""

    def __init__(self, auth_service: AuthService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Autenticación requerida")
        self.setModal(True)
        self._auth_service = auth_service
        self._runner = TaskRunner(self)
        self._modo_login = True
        self.session: Optional[AuthSession] = None

        self._lbl_titulo = QLabel()
        self._lbl_titulo.setStyleSheet("font-size: 16pt; font-weight: 700;")
        self._lbl_titulo.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._input_email = QLineEdit()
        self._input_email.setPlaceholderText("Email")

        self._input_password = QLineEdit()
        self._input_password.setPlaceholderText("Contraseña")
        self._input_password.setEchoMode(QLineEdit.EchoMode.Password)
        self._input_password.returnPressed.connect(self._on_submit)

        self._btn_submit = QPushButton()
        self._btn_submit.setDefault(True)
        self._btn_submit.clicked.connect(self._on_submit)

        self._lbl_alternar = QLabel()
        self._lbl_alternar.setObjectName("toggleLabel")
        self._btn_alternar = QPushButton()
        self._btn_alternar.setObjectName("toggleButton")
        self._btn_alternar.setFlat(True)
        self._btn_alternar.clicked.connect(self._on_toggle_mode)

        self._build_ui()
        self._actualizar_textos()
        self._input_email.setFocus()

    def _build_ui(self) -> None:
        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        form.addRow("Email", self._input_email)
        form.addRow("Contraseña", self._input_password)

        toggle = QHBoxLayout()
        toggle.addStretch(1)
        toggle.addWidget(self._lbl_alternar)
        toggle.addWidget(self._btn_alternar)
        toggle.addStretch(1)

        layout = QVBoxLayout()
        layout.setSpacing(16)
        layout.setContentsMargins(24, 20, 24, 18)
        layout.addWidget(self._lbl_titulo)
        layout.addLayout(form)
        layout.addWidget(self._btn_submit)
        layout.addLayout(toggle)

        self.setLayout(layout)
        self.setMinimumWidth(420)
        self._apply_styles()

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------
    def _on_toggle_mode(self) -> None:
        self._modo_login = not self._modo_login
        self._actualizar_textos()

    def _on_submit(self) -> None:
        if self._runner.ocupado:
            return

        email = self._input_email.text()
        password = self._input_password.text()
        if self._modo_login:
            tarea = partial(self._auth_service.iniciar_sesion, email, password)
        else:
            tarea = partial(self._auth_service.registrarse, email, password)

        self._set_cargando(True)
        self._runner.ejecutar(tarea, self._on_auth_completed, self._on_auth_failed)

    def _on_auth_completed(self, session: Optional[AuthSession]) -> None:
        self._set_cargando(False)
        if session is None:
            QMessageBox.information(
                self,
                "Registro",
                "Cuenta creada. Revisa tu correo para confirmarla y luego inicia sesión.",
            )
            self._modo_login = True
            self._actualizar_textos()
            return

        self.session = session
        self.accept()

    def _on_auth_failed(self, exc: DirectorioError) -> None:
        self._set_cargando(False)
        QMessageBox.warning(self, "Inicio de sesión", exc.message)

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _actualizar_textos(self) -> None:
        accion = "Ingresar" if self._modo_login else "Registrarse"
        self._lbl_titulo.setText(accion)
        self._btn_submit.setText(accion)
        if self._modo_login:
            self._lbl_alternar.setText("¿No tienes cuenta?")
            self._btn_alternar.setText("Registrarse")
        else:
            self._lbl_alternar.setText("¿Ya tienes cuenta?")
            self._btn_alternar.setText("Ingresar")

    def _set_cargando(self, cargando: bool) -> None:
        for widget in (
            self._input_email,
            self._input_password,
            self._btn_submit,
            self._btn_alternar,
        ):
            widget.setEnabled(not cargando)
        if cargando:
            self._btn_submit.setText("Cargando...")
        else:
            self._actualizar_textos()

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QDialog {
                background-color: #111827;
                color: #f9fafb;
                font-family: 'Segoe UI', 'Open Sans', sans-serif;
                font-size: 9pt;
            }
            QLabel {
                color: #f9fafb;
            }
            QLineEdit {
                border: 1px solid #374151;
                border-radius: 8px;
                padding: 8px 10px;
                background: #1f2937;
                color: #f9fafb;
            }
            QLineEdit:focus {
                border: 2px solid #3b82f6;
            }
            QPushButton {
                background: #2563eb;
                color: #fff;
                border: none;
                border-radius: 8px;
                padding: 9px 16px;
                font-weight: 700;
            }
            QPushButton:hover {
                background: #1d4ed8;
            }
            QPushButton:disabled {
                background: #374151;
                color: #9ca3af;
            }
            #toggleLabel {
                color: #9ca3af;
            }
            #toggleButton {
                background: transparent;
                color: #60a5fa;
                padding: 0;
                font-weight: 600;
            }
            """
        )


__all__ = ["LoginDialog"]
