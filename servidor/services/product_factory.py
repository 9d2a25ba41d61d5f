"""Construccion de productos de dominio a partir de drafts del protocolo."""

from __future__ import annotations

from servidor.domain.models import Electronico, Libro, Producto, ProductoGenerico
from shared.errors import ValidationError
from shared.protocol import (
    TIPO_ELECTRONICO,
    TIPO_GENERICO,
    TIPO_LIBRO,
    TIPOS_PRODUCTO,
    ProductoDraft,
)


def build_producto(draft: ProductoDraft) -> Producto:
    """Crea la variante de producto indicada por ``draft.tipo``."""
    tipo = (draft.tipo or "").strip().lower()

    if tipo == TIPO_GENERICO:
        return ProductoGenerico.crear(draft.id, draft.nombre, draft.precio, draft.cantidad)

    if tipo == TIPO_ELECTRONICO:
        return Electronico.crear(
            draft.id,
            draft.nombre,
            draft.precio,
            draft.cantidad,
            marca=draft.marca,
            voltaje=draft.voltaje,
        )

    if tipo == TIPO_LIBRO:
        return Libro.crear(
            draft.id,
            draft.nombre,
            draft.precio,
            draft.cantidad,
            autor=draft.autor,
            numero_paginas=draft.numero_paginas,
        )

    raise ValidationError(
        f"Tipo de producto desconocido: {draft.tipo!r}. "
        f"Valores permitidos: {', '.join(TIPOS_PRODUCTO)}."
    )


def mensaje_exclusivo(producto: Producto) -> str | None:
    """Retorna la garantia o recomendacion propia de la variante, si tiene."""
    if isinstance(producto, Electronico):
        return producto.garantia()
    if isinstance(producto, Libro):
        return producto.recomendacion_lectura()
    return None
