"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from servidor.services.inventory_utils import format_monto
from shared.demo_catalog import build_demo_drafts
from shared.errors import ServiceError
from shared.protocol import (
    AgregarProductoRequest,
    BuscarProductoRequest,
    BuscarProductoResponse,
    EliminarProductoRequest,
    ProductoDraft,
)

from .gateway import LocalServerGateway, ServerGateway

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de UI y servicios de inventario."""

    def __init__(self, gateway: ServerGateway | None = None) -> None:
        self._gateway = gateway or LocalServerGateway()

    def agregar_producto(self, draft: ProductoDraft) -> str:
        """Agrega un producto y retorna su descripcion."""
        response = self._gateway.agregar_producto(AgregarProductoRequest(producto=draft))
        LOGGER.info("Accion ejecutada: agregar producto id=%s", draft.id)
        return response.descripcion

    def listar_productos(self) -> list[str]:
        """Retorna las lineas del listado actual."""
        return self._gateway.listar_productos().lineas

    def buscar_producto(self, producto_id: int) -> BuscarProductoResponse:
        """Busca un producto por ID."""
        response = self._gateway.buscar_producto(BuscarProductoRequest(producto_id=producto_id))
        LOGGER.info(
            "Accion ejecutada: buscar producto id=%s, encontrado=%s",
            producto_id,
            response.descripcion is not None,
        )
        return response

    def eliminar_producto(self, producto_id: int) -> bool:
        """Elimina un producto por ID e indica si existia."""
        response = self._gateway.eliminar_producto(
            EliminarProductoRequest(producto_id=producto_id)
        )
        LOGGER.info(
            "Accion ejecutada: eliminar producto id=%s, eliminado=%s",
            producto_id,
            response.eliminado,
        )
        return response.eliminado

    def valor_total(self) -> float:
        """Retorna el valor total del inventario."""
        return self._gateway.valor_total().valor_total

    def valor_total_formateado(self) -> str:
        """Retorna el valor total listo para mostrar."""
        return format_monto(self.valor_total())

    def cargar_demo(self) -> int:
        """Agrega el catalogo de ejemplo y retorna cuantos productos se agregaron.

        Los IDs ya presentes se omiten con una advertencia.
        """
        agregados = 0
        for draft in build_demo_drafts():
            try:
                self.agregar_producto(draft)
            except ServiceError as exc:
                LOGGER.warning("Producto de ejemplo omitido: %s", exc)
                continue
            agregados += 1

        LOGGER.info("Catalogo de ejemplo cargado: %s productos", agregados)
        return agregados

    def on_exit(
        self,
        app: QApplication | Callable[[], None] | None,
    ) -> None:
        """Cierra la aplicacion."""
        LOGGER.info("Accion ejecutada: salir")

        if callable(app):
            app()
            return

        if app is not None:
            app.quit()
