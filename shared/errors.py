"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class InvalidArgumentError(ValidationError):
    """Argumento de construccion invalido para un producto."""

    def __init__(self, campo: str, mensaje: str) -> None:
        super().__init__(mensaje)
        self.campo = campo


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class DuplicateIdError(ServiceError):
    """Ya existe un producto con el mismo ID en el inventario."""

    def __init__(self, producto_id: int) -> None:
        super().__init__(f"Ya existe un producto con el ID {producto_id}.")
        self.producto_id = producto_id
