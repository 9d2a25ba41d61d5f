"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from servidor.services.inventario import Inventario
from servidor.services.product_factory import build_producto, mensaje_exclusivo
from shared.errors import ServiceError, ValidationError
from shared.protocol import (
    AgregarProductoRequest,
    AgregarProductoResponse,
    BuscarProductoRequest,
    BuscarProductoResponse,
    EliminarProductoRequest,
    EliminarProductoResponse,
    ListarProductosResponse,
    ValorTotalResponse,
)

LOGGER = logging.getLogger(__name__)


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def agregar_producto(self, request: AgregarProductoRequest) -> AgregarProductoResponse:
        """Solicita agregar un producto al inventario."""

    def listar_productos(self) -> ListarProductosResponse:
        """Solicita el listado de productos."""

    def buscar_producto(self, request: BuscarProductoRequest) -> BuscarProductoResponse:
        """Solicita buscar un producto por ID."""

    def eliminar_producto(
        self,
        request: EliminarProductoRequest,
    ) -> EliminarProductoResponse:
        """Solicita eliminar un producto por ID."""

    def valor_total(self) -> ValorTotalResponse:
        """Solicita el valor total del inventario."""


class LocalServerGateway:
    """Implementacion local del gateway usando el inventario en memoria."""

    def __init__(self, inventario: Inventario | None = None) -> None:
        self._inventario = inventario if inventario is not None else Inventario()

    def agregar_producto(self, request: AgregarProductoRequest) -> AgregarProductoResponse:
        """Construye el producto desde el draft y lo agrega al inventario."""
        try:
            producto = build_producto(request.producto)
            self._inventario.agregar(producto)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al agregar producto.")
            raise ServiceError("No fue posible agregar el producto al inventario.") from exc

        return AgregarProductoResponse(descripcion=producto.describir())

    def listar_productos(self) -> ListarProductosResponse:
        """Retorna las lineas del listado actual."""
        return ListarProductosResponse(lineas=self._inventario.listar())

    def buscar_producto(self, request: BuscarProductoRequest) -> BuscarProductoResponse:
        """Busca por ID y retorna la descripcion junto al mensaje del tipo."""
        producto = self._inventario.buscar_por_id(request.producto_id)
        if producto is None:
            return BuscarProductoResponse(descripcion=None)

        return BuscarProductoResponse(
            descripcion=producto.describir(),
            mensaje_exclusivo=mensaje_exclusivo(producto),
        )

    def eliminar_producto(
        self,
        request: EliminarProductoRequest,
    ) -> EliminarProductoResponse:
        """Elimina por ID delegando en el inventario."""
        return EliminarProductoResponse(
            eliminado=self._inventario.eliminar_por_id(request.producto_id)
        )

    def valor_total(self) -> ValorTotalResponse:
        """Calcula el valor total del inventario."""
        return ValorTotalResponse(valor_total=self._inventario.valor_total())
