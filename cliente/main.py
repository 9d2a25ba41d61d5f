"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import logging
import sys

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from cliente.frontend.main_window import MainWindow
from parametros import APP_ICON_PATH
from servidor.services.inventario import Inventario

LOGGER = logging.getLogger(__name__)


def main() -> int:
    """Ejecuta la aplicacion grafica con el catalogo de ejemplo cargado."""
    app = QApplication(sys.argv)
    if APP_ICON_PATH.exists():
        app.setWindowIcon(QIcon(str(APP_ICON_PATH)))
    else:
        LOGGER.warning("No se encontro icono de aplicacion en: %s", APP_ICON_PATH)

    gateway = LocalServerGateway(inventario=Inventario())
    controller = AppController(gateway=gateway)
    controller.cargar_demo()

    window = MainWindow(controller=controller)
    if not app.windowIcon().isNull():
        window.setWindowIcon(app.windowIcon())
    window.show()

    LOGGER.info("Aplicacion iniciada.")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
