"""Ejecución de llamadas al backend fuera del hilo de la interfaz."""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger
from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from directorio.errors import DirectorioError


class _TaskWorker(QObject):
    finished = pyqtSignal(object)
    error = pyqtSignal(object)

    def __init__(self, tarea: Callable[[], Any]) -> None:
        super().__init__()
        self.tarea = tarea

    def run(self) -> None:
        try:
            resultado = self.tarea()
        except DirectorioError as exc:
            self.error.emit(exc)
            return
        except Exception as exc:  # errores del cliente o del mapeo de filas
            logger.exception("Error inesperado en tarea de fondo")
            self.error.emit(DirectorioError(f"Error inesperado: {exc}"))
            return
        self.finished.emit(resultado)


class TaskRunner(QObject):
    """Lanza cada tarea en su propio ``QThread``.

    Las tareas no se coordinan entre sí: si dos terminan casi a la vez, la
    última respuesta en llegar es la que ve la interfaz. ``on_success`` y
    ``on_error`` deben ser métodos de un ``QObject`` del hilo principal para
    que Qt los invoque en ese hilo.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._activos: dict[QThread, _TaskWorker] = {}

    def ejecutar(
        self,
        tarea: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[DirectorioError], None],
    ) -> None:
        thread = QThread(self)
        worker = _TaskWorker(tarea)
        worker.moveToThread(thread)
        self._activos[thread] = worker

        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        worker.finished.connect(on_success)
        worker.error.connect(on_error)
        thread.finished.connect(self._limpiar_hilo)

        thread.start()

    @property
    def ocupado(self) -> bool:
        return bool(self._activos)

    @pyqtSlot()
    def _limpiar_hilo(self) -> None:
        thread = self.sender()
        worker = self._activos.pop(thread, None)
        if worker is not None:
            worker.deleteLater()
        if isinstance(thread, QThread):
            thread.deleteLater()


__all__ = ["TaskRunner"]
