"""Ventana principal del inventario."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import AppController
from cliente.frontend.create_product_dialog import CreateProductDialog
from cliente.frontend.dialogs import ask_producto_id, show_error, show_info
from parametros import APP_TITLE
from shared.errors import ServiceError, ValidationError


class MainWindow(QMainWindow):
    """Ventana principal con el listado y las acciones del inventario."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller

        self._productos_list: QListWidget
        self._total_label: QLabel
        self._add_button: QPushButton
        self._find_button: QPushButton
        self._remove_button: QPushButton
        self._exit_button: QPushButton

        self.setWindowTitle(APP_TITLE)
        screen = QGuiApplication.primaryScreen()
        geo = screen.availableGeometry()
        w = int(geo.width() * 0.65)
        h = int(geo.height() * 0.75)
        self.resize(w, h)
        self.setMinimumSize(int(w * 0.70), int(h * 0.70))
        self._build_ui()
        self._apply_styles()
        self._connect_signals()
        self.refresh()

    def _build_ui(self) -> None:
        """Construye la pagina principal."""
        page = QWidget(self)
        self.setCentralWidget(page)

        root_layout = QVBoxLayout(page)
        root_layout.setContentsMargins(32, 32, 32, 32)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(32, 32, 32, 32)
        card_layout.setSpacing(14)

        title_label = QLabel("Inventario Actual", card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 22, QFont.Weight.Bold))
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._productos_list = QListWidget(card)
        self._productos_list.setObjectName("productosList")

        self._total_label = QLabel(card)
        self._total_label.setObjectName("totalLabel")
        self._total_label.setAlignment(Qt.AlignmentFlag.AlignRight)

        self._add_button = self._build_button("Agregar producto")
        self._find_button = self._build_button("Buscar por ID")
        self._remove_button = self._build_button("Eliminar por ID")
        self._exit_button = self._build_button("Salir")
        self._exit_button.setObjectName("exitButton")

        buttons_layout = QHBoxLayout()
        buttons_layout.setSpacing(10)
        buttons_layout.addWidget(self._add_button)
        buttons_layout.addWidget(self._find_button)
        buttons_layout.addWidget(self._remove_button)
        buttons_layout.addStretch(1)
        buttons_layout.addWidget(self._exit_button)

        card_layout.addWidget(title_label)
        card_layout.addWidget(self._productos_list, stretch=1)
        card_layout.addWidget(self._total_label)
        card_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard {
                background-color: #ffffff;
                border-radius: 18px;
            }
            QListWidget#productosList {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 6px;
            }
            QLabel#totalLabel {
                color: #111827;
                font-family: "Segoe UI";
                font-size: 15px;
                font-weight: 600;
            }
            QPushButton {
                background-color: #C80202;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 14px;
                font-weight: 600;
                min-height: 44px;
                padding: 8px 14px;
            }
            QPushButton:hover {
                background-color: #A30202;
            }
            QPushButton:pressed {
                background-color: #820101;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta botones de UI con acciones del controller."""
        self._add_button.clicked.connect(self._on_add_clicked)
        self._find_button.clicked.connect(self._on_find_clicked)
        self._remove_button.clicked.connect(self._on_remove_clicked)
        self._exit_button.clicked.connect(self._on_exit_clicked)

    def refresh(self) -> None:
        """Recarga el listado y el valor total desde el controller."""
        try:
            lineas = self._controller.listar_productos()
            total = self._controller.valor_total_formateado()
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error de inventario", str(exc))
            return

        self._productos_list.clear()
        self._productos_list.addItems(lineas)
        self._total_label.setText(f"Valor total del inventario: {total}")

    def _on_add_clicked(self, _checked: bool = False) -> None:
        """Abre el dialogo modal para agregar un producto."""
        dialog = CreateProductDialog(controller=self._controller, parent=self)
        if dialog.exec():
            self.refresh()

    def _on_find_clicked(self, _checked: bool = False) -> None:
        """Busca un producto por ID y muestra su informacion."""
        producto_id = ask_producto_id(self, "Buscar producto")
        if producto_id is None:
            return

        response = self._controller.buscar_producto(producto_id)
        if response.descripcion is None:
            show_info(self, "Buscar producto", f"No existe un producto con ID {producto_id}.")
            return

        message = response.descripcion
        if response.mensaje_exclusivo:
            message = f"{message}\n\n{response.mensaje_exclusivo}"
        show_info(self, f"Producto con ID {producto_id} encontrado", message)

    def _on_remove_clicked(self, _checked: bool = False) -> None:
        """Elimina un producto por ID y refresca el listado."""
        producto_id = ask_producto_id(self, "Eliminar producto")
        if producto_id is None:
            return

        if not self._controller.eliminar_producto(producto_id):
            show_info(self, "Eliminar producto", f"No existe un producto con ID {producto_id}.")
            return

        self.refresh()

    def _on_exit_clicked(self) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance())

    @staticmethod
    def _build_button(text: str) -> QPushButton:
        """Construye un boton estandar de acciones."""
        button = QPushButton(text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
