"""Catalogo de productos de ejemplo para demos y pruebas manuales."""

from __future__ import annotations

from shared.protocol import (
    TIPO_ELECTRONICO,
    TIPO_GENERICO,
    TIPO_LIBRO,
    ProductoDraft,
)


def build_demo_drafts() -> list[ProductoDraft]:
    """Retorna drafts nuevos en cada llamada para evitar compartir estado."""
    return [
        ProductoDraft(
            tipo=TIPO_ELECTRONICO,
            id=1,
            nombre="Laptop HP",
            precio=899.99,
            cantidad=5,
            marca="HP",
            voltaje="110V",
        ),
        ProductoDraft(
            tipo=TIPO_ELECTRONICO,
            id=2,
            nombre="Smartphone Samsung",
            precio=699.99,
            cantidad=10,
            marca="Samsung",
            voltaje="220V",
        ),
        ProductoDraft(
            tipo=TIPO_LIBRO,
            id=3,
            nombre="Cien años de soledad",
            precio=29.99,
            cantidad=15,
            autor="Gabriel García Márquez",
            numero_paginas=496,
        ),
        ProductoDraft(
            tipo=TIPO_GENERICO,
            id=4,
            nombre="Teclado genérico",
            precio=12.50,
            cantidad=30,
        ),
    ]
