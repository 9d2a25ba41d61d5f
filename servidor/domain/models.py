"""Modelos de dominio de inventario.

Los campos comunes viven en ``DatosProducto`` y cada variante los compone.
Todas las clases son inmutables: una referencia obtenida desde el inventario
no permite modificar el producto almacenado.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Protocol

from shared.errors import InvalidArgumentError
from shared.protocol import TIPO_ELECTRONICO, TIPO_GENERICO, TIPO_LIBRO

GARANTIA_ELECTRONICO = "Este producto electrónico tiene una garantía de 1 año."
RECOMENDACION_LIBRO = (
    "Este libro es altamente recomendado para los amantes de la literatura."
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _to_precio(value: object) -> float:
    """Convierte un precio real o Decimal a float finito."""
    if not isinstance(value, (numbers.Real, Decimal)) or isinstance(value, bool):
        raise InvalidArgumentError("precio", "El precio debe ser un número.")

    try:
        precio = float(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidArgumentError("precio", "El precio debe ser un número finito.") from exc

    if not math.isfinite(precio):
        raise InvalidArgumentError("precio", "El precio debe ser un número finito.")
    return precio


@dataclass(frozen=True, slots=True)
class DatosProducto:
    """Campos validados compartidos por todos los tipos de producto."""

    id: int
    nombre: str
    precio: float
    cantidad: int

    def __post_init__(self) -> None:
        if not _is_int(self.id) or self.id <= 0:
            raise InvalidArgumentError("id", "El ID debe ser un número positivo.")

        precio = _to_precio(self.precio)
        if precio < 0:
            raise InvalidArgumentError("precio", "El precio no puede ser negativo.")

        if not _is_int(self.cantidad) or self.cantidad < 0:
            raise InvalidArgumentError("cantidad", "La cantidad no puede ser negativa.")

        object.__setattr__(self, "precio", precio)

    @property
    def valor_en_stock(self) -> float:
        """Precio unitario por unidades disponibles."""
        return self.precio * self.cantidad

    def describir(self) -> str:
        """Retorna la informacion basica del producto."""
        return (
            f"ID: {self.id} | Producto: {self.nombre} | "
            f"Precio: ${self.precio:.2f} | Cantidad: {self.cantidad}"
        )


class Producto(Protocol):
    """Capacidad comun de cualquier producto almacenable en inventario."""

    tipo: ClassVar[str]

    @property
    def datos(self) -> DatosProducto:
        ...

    @property
    def id(self) -> int:
        ...

    def describir(self) -> str:
        ...


@dataclass(frozen=True, slots=True)
class ProductoGenerico:
    """Producto sin atributos adicionales."""

    tipo: ClassVar[str] = TIPO_GENERICO

    datos: DatosProducto

    @classmethod
    def crear(
        cls,
        id: int,
        nombre: str,
        precio: float,
        cantidad: int,
    ) -> ProductoGenerico:
        """Construye un producto generico validando los datos comunes."""
        return cls(DatosProducto(id, nombre, precio, cantidad))

    @property
    def id(self) -> int:
        return self.datos.id

    def describir(self) -> str:
        return self.datos.describir()


@dataclass(frozen=True, slots=True)
class Electronico:
    """Producto electronico con marca y voltaje."""

    tipo: ClassVar[str] = TIPO_ELECTRONICO

    datos: DatosProducto
    marca: str
    voltaje: str

    @classmethod
    def crear(
        cls,
        id: int,
        nombre: str,
        precio: float,
        cantidad: int,
        marca: str,
        voltaje: str,
    ) -> Electronico:
        """Construye un electronico validando primero los datos comunes."""
        return cls(DatosProducto(id, nombre, precio, cantidad), marca, voltaje)

    @property
    def id(self) -> int:
        return self.datos.id

    def describir(self) -> str:
        """Agrega marca y voltaje a la descripcion basica."""
        return f"{self.datos.describir()} | Marca: {self.marca} | Voltaje: {self.voltaje}"

    def garantia(self) -> str:
        """Retorna la garantia fija de los productos electronicos."""
        return GARANTIA_ELECTRONICO


@dataclass(frozen=True, slots=True)
class Libro:
    """Libro con autor y numero de paginas.

    numero_paginas no se valida: se acepta cualquier entero.
    """

    tipo: ClassVar[str] = TIPO_LIBRO

    datos: DatosProducto
    autor: str
    numero_paginas: int

    @classmethod
    def crear(
        cls,
        id: int,
        nombre: str,
        precio: float,
        cantidad: int,
        autor: str,
        numero_paginas: int,
    ) -> Libro:
        """Construye un libro validando primero los datos comunes."""
        return cls(DatosProducto(id, nombre, precio, cantidad), autor, numero_paginas)

    @property
    def id(self) -> int:
        return self.datos.id

    def describir(self) -> str:
        """Agrega autor y paginas a la descripcion basica."""
        return (
            f"{self.datos.describir()} | Autor: {self.autor} | "
            f"Páginas: {self.numero_paginas}"
        )

    def recomendacion_lectura(self) -> str:
        """Retorna la recomendacion fija de lectura."""
        return RECOMENDACION_LIBRO
