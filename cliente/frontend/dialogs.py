"""Helpers de dialogos para frontend."""

from __future__ import annotations

from PyQt6.QtWidgets import QInputDialog, QMessageBox, QWidget


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo informativo."""
    QMessageBox.information(parent, title, message)


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo de error."""
    QMessageBox.critical(parent, title, message)


def ask_producto_id(parent: QWidget | None, title: str) -> int | None:
    """Pide un ID de producto; retorna None si el usuario cancela."""
    value, accepted = QInputDialog.getInt(
        parent,
        title,
        "ID del producto:",
        1,
        1,
        2_147_483_647,
    )
    return value if accepted else None
