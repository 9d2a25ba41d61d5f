"""Demo de consola: recorre las operaciones del inventario con productos de ejemplo."""

from __future__ import annotations

import logging

from servidor.domain.models import Electronico, Libro
from servidor.services.inventario import Inventario
from servidor.services.inventory_utils import build_listado, format_monto
from servidor.services.product_factory import build_producto
from shared.demo_catalog import build_demo_drafts
from shared.errors import ServiceError, ValidationError

LOGGER = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configura logging para salida en consola.

    Los avisos del inventario ya se imprimen; el log queda en WARNING.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def run_demo() -> None:
    """Ejecuta la secuencia de demo; propaga errores de dominio."""
    inventario = Inventario(notificar=print)
    for draft in build_demo_drafts():
        inventario.agregar(build_producto(draft))

    print()
    print(build_listado(inventario.listar()))

    print()
    laptop = inventario.buscar_por_id(1)
    if isinstance(laptop, Electronico):
        print(f"Garantía del producto 1: {laptop.garantia()}")
    libro = inventario.buscar_por_id(3)
    if isinstance(libro, Libro):
        print(f"Recomendación de lectura del producto 3: {libro.recomendacion_lectura()}")

    print()
    print(f"Valor total del inventario: {format_monto(inventario.valor_total())}")

    buscado = inventario.buscar_por_id(3)
    if buscado is not None:
        print()
        print(f"Producto con ID 3 encontrado: {buscado.describir()}")

    inventario.eliminar_por_id(2)
    print()
    print("Después de eliminar el producto con ID 2:")
    print(build_listado(inventario.listar()))


def main() -> int:
    """Punto de entrada de la demo."""
    configure_logging()
    try:
        run_demo()
    except (ValidationError, ServiceError) as exc:
        LOGGER.debug("Demo interrumpida por error de dominio.", exc_info=True)
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
