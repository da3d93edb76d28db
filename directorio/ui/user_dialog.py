"""Diálogo modal para agregar o editar un usuario."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from directorio.models.user import UserDraft


class UserDialog(QDialog):
    """Formulario de alta/edición.

    El diálogo sólo arma el borrador; guardar es responsabilidad de la ventana
    principal, que conecta ``btn_guardar`` y cierra el diálogo al terminar.
    Cancelar descarta el borrador.
    """

    def __init__(self, borrador: UserDraft, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._editando = borrador.editando
        self.setModal(True)
        self.setWindowTitle("Editar usuario" if borrador.es_edicion else "Nuevo usuario")

        self._lbl_titulo = QLabel(
            "Editar usuario" if borrador.es_edicion else "Agregar nuevo usuario"
        )
        self._lbl_titulo.setStyleSheet("font-size: 14pt; font-weight: 700; color: #1f2937;")

        self.input_nombre = QLineEdit(borrador.nombre)
        self.input_nombre.setPlaceholderText("Nombre")

        self.input_email = QLineEdit(borrador.email)
        self.input_email.setPlaceholderText("Email")

        self.btn_guardar = QPushButton(
            "Guardar cambios" if borrador.es_edicion else "Agregar usuario"
        )
        self.btn_cancelar = QPushButton("Cancelar")
        self.btn_cancelar.clicked.connect(self.reject)

        self._build_ui()
        self.input_nombre.setFocus()

    def _build_ui(self) -> None:
        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        form.addRow("Nombre", self.input_nombre)
        form.addRow("Email", self.input_email)

        buttons = QDialogButtonBox()
        buttons.addButton(self.btn_cancelar, QDialogButtonBox.ButtonRole.RejectRole)
        buttons.addButton(self.btn_guardar, QDialogButtonBox.ButtonRole.AcceptRole)

        layout = QVBoxLayout()
        layout.setSpacing(14)
        layout.setContentsMargins(20, 18, 20, 16)
        layout.addWidget(self._lbl_titulo)
        layout.addLayout(form)
        layout.addWidget(buttons)

        self.setLayout(layout)
        self.setMinimumWidth(400)
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
                border-radius: 6px;
                padding: 7px 14px;
            }
            """
        )

    def borrador(self) -> UserDraft:
        """Borrador con el contenido actual del formulario."""

        return UserDraft(
            nombre=self.input_nombre.text(),
            email=self.input_email.text(),
            editando=self._editando,
        )

    def set_ocupado(self, ocupado: bool) -> None:
        for widget in (self.input_nombre, self.input_email, self.btn_guardar, self.btn_cancelar):
            widget.setEnabled(not ocupado)


__all__ = ["UserDialog"]
