"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math

from shared.errors import ValidationError


def parse_entero(texto: str, campo: str) -> int:
    """Convierte texto a entero o falla indicando el campo."""
    normalized = (texto or "").strip()
    if not normalized:
        raise ValidationError(f"El campo {campo} es obligatorio.")

    try:
        return int(normalized)
    except ValueError as exc:
        raise ValidationError(f"El campo {campo} debe ser un numero entero.") from exc


def parse_decimal(texto: str, campo: str) -> float:
    """Convierte texto a decimal aceptando coma o punto como separador."""
    normalized = (texto or "").strip().replace(",", ".")
    if not normalized:
        raise ValidationError(f"El campo {campo} es obligatorio.")

    try:
        value = float(normalized)
    except ValueError as exc:
        raise ValidationError(f"El campo {campo} debe ser un numero.") from exc

    if not math.isfinite(value):
        raise ValidationError(f"El campo {campo} debe ser un numero finito.")
    return value
