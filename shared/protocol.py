"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field

TIPO_GENERICO = "generico"
TIPO_ELECTRONICO = "electronico"
TIPO_LIBRO = "libro"

TIPOS_PRODUCTO: tuple[str, ...] = (TIPO_GENERICO, TIPO_ELECTRONICO, TIPO_LIBRO)


@dataclass(slots=True)
class ProductoDraft:
    """DTO con los datos capturados para crear un producto de cualquier tipo."""

    tipo: str
    id: int
    nombre: str
    precio: float
    cantidad: int
    marca: str = ""
    voltaje: str = ""
    autor: str = ""
    numero_paginas: int = 0


@dataclass(slots=True)
class AgregarProductoRequest:
    """Solicitud para agregar un producto al inventario."""

    producto: ProductoDraft


@dataclass(slots=True)
class AgregarProductoResponse:
    """Respuesta con la descripcion del producto agregado."""

    descripcion: str


@dataclass(slots=True)
class ListarProductosResponse:
    """Respuesta con las lineas del listado de inventario."""

    lineas: list[str] = field(default_factory=list)


@dataclass(slots=True)
class BuscarProductoRequest:
    """Solicitud de busqueda de producto por ID."""

    producto_id: int


@dataclass(slots=True)
class BuscarProductoResponse:
    """Respuesta de busqueda; descripcion es None si no existe.

    mensaje_exclusivo trae la garantia o recomendacion segun el tipo.
    """

    descripcion: str | None
    mensaje_exclusivo: str | None = None


@dataclass(slots=True)
class EliminarProductoRequest:
    """Solicitud de eliminacion de producto por ID."""

    producto_id: int


@dataclass(slots=True)
class EliminarProductoResponse:
    """Respuesta indicando si el producto fue eliminado."""

    eliminado: bool


@dataclass(slots=True)
class ValorTotalResponse:
    """Respuesta con el valor total del inventario."""

    valor_total: float
