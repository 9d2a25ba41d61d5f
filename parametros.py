"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
APP_TITLE = "Inventario de Productos"
APP_ICON_PATH = BASE_DIR / "cliente" / "utilities" / "icono.ico"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
)
