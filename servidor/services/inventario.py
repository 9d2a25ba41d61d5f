"""Inventario en memoria de productos indexados por ID."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator

from servidor.domain.models import Producto
from shared.errors import DuplicateIdError

LOGGER = logging.getLogger(__name__)

SIN_PRODUCTOS = "No hay productos en el inventario."


class Inventario:
    """Administra una coleccion de productos con IDs unicos.

    El dict interno conserva el orden de insercion, que es el orden usado
    al listar. Los avisos para el usuario se registran en el log y, si se
    entrega ``notificar``, tambien se envian a ese callback.
    """

    def __init__(self, notificar: Callable[[str], None] | None = None) -> None:
        self._productos: dict[int, Producto] = {}
        self._notificar = notificar

    def agregar(self, producto: Producto) -> None:
        """Agrega un producto; falla si el ID ya existe."""
        producto_id = producto.id
        if producto_id in self._productos:
            LOGGER.warning("Producto rechazado por ID duplicado: %s", producto_id)
            raise DuplicateIdError(producto_id)

        self._productos[producto_id] = producto
        self._emitir(f"Producto agregado: {producto.describir()}")

    def listar(self) -> list[str]:
        """Retorna descripciones en orden de insercion o el aviso de vacio."""
        if not self._productos:
            return [SIN_PRODUCTOS]
        return [producto.describir() for producto in self._productos.values()]

    def buscar_por_id(self, producto_id: int) -> Producto | None:
        """Retorna el producto almacenado o None."""
        return self._productos.get(producto_id)

    def eliminar_por_id(self, producto_id: int) -> bool:
        """Elimina el producto si existe e indica si hubo eliminacion."""
        producto = self._productos.pop(producto_id, None)
        if producto is None:
            LOGGER.debug("Eliminacion sin efecto, ID inexistente: %s", producto_id)
            return False

        LOGGER.info("Producto eliminado: %s", producto.describir())
        return True

    def valor_total(self) -> float:
        """Suma precio * cantidad de todos los productos."""
        return math.fsum(
            producto.datos.valor_en_stock for producto in self._productos.values()
        )

    def ids(self) -> list[int]:
        """Retorna los IDs en orden de insercion."""
        return list(self._productos)

    def __len__(self) -> int:
        return len(self._productos)

    def __contains__(self, producto_id: object) -> bool:
        return producto_id in self._productos

    def __iter__(self) -> Iterator[Producto]:
        return iter(list(self._productos.values()))

    def _emitir(self, mensaje: str) -> None:
        LOGGER.info("%s", mensaje)
        if self._notificar is not None:
            self._notificar(mensaje)
