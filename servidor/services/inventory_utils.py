"""Utilidades de presentacion para el inventario."""

from __future__ import annotations

from collections.abc import Sequence

from servidor.services.inventario import SIN_PRODUCTOS

LISTADO_TITULO = "Inventario Actual:"
LISTADO_SEPARADOR = "-" * 33


def format_monto(amount: float) -> str:
    """Formatea un monto con separador de miles y dos decimales."""
    return f"${amount:,.2f}"


def build_listado(lineas: Sequence[str]) -> str:
    """Construye el bloque de listado con titulo y separador."""
    if not lineas or list(lineas) == [SIN_PRODUCTOS]:
        return SIN_PRODUCTOS

    return "\n".join([LISTADO_TITULO, LISTADO_SEPARADOR, *lineas])
