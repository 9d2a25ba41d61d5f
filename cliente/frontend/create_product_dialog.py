"""Dialogo para agregar productos al inventario."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.validators import parse_decimal, parse_entero
from cliente.frontend.dialogs import show_error, show_info
from shared.errors import ServiceError, ValidationError
from shared.protocol import (
    TIPO_ELECTRONICO,
    TIPO_GENERICO,
    TIPO_LIBRO,
    ProductoDraft,
)

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class CreateProductDialog(QDialog):
    """Dialogo modal para capturar un producto generico, electronico o libro."""

    _TIPO_LABELS: tuple[tuple[str, str], ...] = (
        ("Producto generico", TIPO_GENERICO),
        ("Electronico", TIPO_ELECTRONICO),
        ("Libro", TIPO_LIBRO),
    )

    def __init__(
        self,
        controller: AppController,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._tipo_input: QComboBox
        self._id_input: QLineEdit
        self._nombre_input: QLineEdit
        self._precio_input: QLineEdit
        self._cantidad_input: QLineEdit
        self._marca_input: QLineEdit
        self._voltaje_input: QLineEdit
        self._autor_input: QLineEdit
        self._paginas_input: QLineEdit
        self._variant_rows: dict[str, list[QWidget]] = {}

        self.setWindowTitle("Agregar producto")
        self.setModal(True)
        self.setMinimumSize(480, 420)

        self._build_ui()
        self._apply_styles()
        self._on_tipo_changed(0)

    def _build_ui(self) -> None:
        """Construye widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)

        card = QFrame(self)
        card.setObjectName("dialogCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(12)

        title_label = QLabel("Agregar producto", card)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._tipo_input = QComboBox(card)
        for label, tipo in self._TIPO_LABELS:
            self._tipo_input.addItem(label, tipo)
        self._tipo_input.currentIndexChanged.connect(self._on_tipo_changed)

        self._id_input = self._build_line_edit(card, "1")
        self._nombre_input = self._build_line_edit(card, "Laptop HP")
        self._precio_input = self._build_line_edit(card, "899.99")
        self._cantidad_input = self._build_line_edit(card, "5")
        self._marca_input = self._build_line_edit(card, "HP")
        self._voltaje_input = self._build_line_edit(card, "110V")
        self._autor_input = self._build_line_edit(card, "Gabriel García Márquez")
        self._paginas_input = self._build_line_edit(card, "496")

        form_layout = QGridLayout()
        form_layout.setHorizontalSpacing(12)
        form_layout.setVerticalSpacing(8)

        row = 0
        row = self._add_form_row(form_layout, row, "Tipo", self._tipo_input)
        row = self._add_form_row(form_layout, row, "ID", self._id_input)
        row = self._add_form_row(form_layout, row, "Nombre", self._nombre_input)
        row = self._add_form_row(form_layout, row, "Precio", self._precio_input)
        row = self._add_form_row(form_layout, row, "Cantidad", self._cantidad_input)

        variant_fields = (
            (TIPO_ELECTRONICO, "Marca", self._marca_input),
            (TIPO_ELECTRONICO, "Voltaje", self._voltaje_input),
            (TIPO_LIBRO, "Autor", self._autor_input),
            (TIPO_LIBRO, "Paginas", self._paginas_input),
        )
        for tipo, label_text, field in variant_fields:
            label = self._build_form_label(label_text)
            self._variant_rows.setdefault(tipo, []).extend([label, field])
            form_layout.addWidget(label, row, 0)
            form_layout.addWidget(field, row, 1)
            row += 1

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)

        cancel_button = QPushButton("Cancelar", card)
        cancel_button.setObjectName("cancelButton")
        add_button = QPushButton("Agregar", card)

        cancel_button.clicked.connect(self.reject)
        add_button.clicked.connect(self._on_add_clicked)

        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(add_button)

        card_layout.addWidget(title_label)
        card_layout.addSpacing(4)
        card_layout.addLayout(form_layout)
        card_layout.addSpacing(4)
        card_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        self._id_input.setFocus()

    def _apply_styles(self) -> None:
        """Aplica estilos visuales consistentes con la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #eef1f4;
            }
            QFrame#dialogCard {
                background-color: #ffffff;
                border-radius: 16px;
            }
            QLabel#titleLabel {
                color: #20232a;
                font-family: "Segoe UI";
                font-size: 22px;
                font-weight: 700;
            }
            QLabel#formLabel {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
            }
            QLineEdit, QComboBox {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 8px;
            }
            QLineEdit:focus, QComboBox:focus {
                border: 1px solid #2563eb;
                background-color: #ffffff;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 40px;
                min-width: 100px;
                padding: 8px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton#cancelButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#cancelButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _selected_tipo(self) -> str:
        return str(self._tipo_input.currentData() or TIPO_GENERICO)

    def _on_tipo_changed(self, _index: int) -> None:
        """Muestra solo los campos propios del tipo seleccionado."""
        tipo = self._selected_tipo()
        for variant, widgets in self._variant_rows.items():
            for widget in widgets:
                widget.setVisible(variant == tipo)

    def _collect_data(self) -> ProductoDraft:
        """Convierte el formulario en draft; falla con ValidationError."""
        tipo = self._selected_tipo()
        draft = ProductoDraft(
            tipo=tipo,
            id=parse_entero(self._id_input.text(), "ID"),
            nombre=self._nombre_input.text().strip(),
            precio=parse_decimal(self._precio_input.text(), "Precio"),
            cantidad=parse_entero(self._cantidad_input.text(), "Cantidad"),
        )
        if tipo == TIPO_ELECTRONICO:
            draft.marca = self._marca_input.text().strip()
            draft.voltaje = self._voltaje_input.text().strip()
        elif tipo == TIPO_LIBRO:
            draft.autor = self._autor_input.text().strip()
            draft.numero_paginas = parse_entero(self._paginas_input.text(), "Paginas")
        return draft

    def _on_add_clicked(self) -> None:
        """Valida y agrega el producto usando el controller."""
        try:
            descripcion = self._controller.agregar_producto(self._collect_data())
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al agregar producto", str(exc))
            return

        show_info(self, "Producto agregado", descripcion)
        self.accept()

    def _add_form_row(
        self,
        layout: QGridLayout,
        row: int,
        label_text: str,
        field: QWidget,
    ) -> int:
        """Agrega una fila al grid y retorna el siguiente indice de fila."""
        layout.addWidget(self._build_form_label(label_text), row, 0)
        layout.addWidget(field, row, 1)
        return row + 1

    @staticmethod
    def _build_form_label(text: str) -> QLabel:
        """Crea labels de formulario con estilo consistente."""
        label = QLabel(text)
        label.setObjectName("formLabel")
        return label

    @staticmethod
    def _build_line_edit(parent: QWidget, placeholder: str) -> QLineEdit:
        field = QLineEdit(parent)
        field.setPlaceholderText(placeholder)
        return field
