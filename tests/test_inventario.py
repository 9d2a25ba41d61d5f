"""Tests para el inventario en memoria."""

from __future__ import annotations

import unittest

from servidor.domain.models import Electronico, Libro, ProductoGenerico
from servidor.services.inventario import SIN_PRODUCTOS, Inventario
from shared.errors import DuplicateIdError, ServiceError


class InventarioTests(unittest.TestCase):
    """Valida alta, listado, busqueda, eliminacion y valor total."""

    def setUp(self) -> None:
        self.laptop = Electronico.crear(1, "Laptop HP", 899.99, 5, "HP", "110V")
        self.smartphone = Electronico.crear(
            2, "Smartphone Samsung", 699.99, 10, "Samsung", "220V"
        )
        self.libro = Libro.crear(
            3, "Cien años de soledad", 29.99, 15, "Gabriel García Márquez", 496
        )

    def test_inventario_vacio(self) -> None:
        """Un inventario nuevo lista el aviso de vacio y vale 0."""
        inventario = Inventario()

        self.assertEqual(inventario.listar(), [SIN_PRODUCTOS])
        self.assertEqual(inventario.valor_total(), 0.0)
        self.assertEqual(len(inventario), 0)

    def test_agregar_notifica_descripcion(self) -> None:
        """Agregar debe emitir aviso con la descripcion del producto."""
        avisos: list[str] = []
        inventario = Inventario(notificar=avisos.append)

        inventario.agregar(self.laptop)

        self.assertEqual(avisos, [f"Producto agregado: {self.laptop.describir()}"])

    def test_agregar_registra_en_log(self) -> None:
        """El aviso de alta tambien debe quedar en el log."""
        inventario = Inventario()

        with self.assertLogs("servidor.services.inventario", level="INFO") as logs:
            inventario.agregar(self.libro)

        self.assertTrue(any("Producto agregado: ID: 3" in line for line in logs.output))

    def test_agregar_id_duplicado_falla_y_conserva_original(self) -> None:
        """El segundo producto con el mismo ID debe rechazarse."""
        inventario = Inventario()
        inventario.agregar(self.laptop)
        duplicado = ProductoGenerico.crear(1, "Otro", 1.0, 1)

        with self.assertRaises(DuplicateIdError) as ctx:
            inventario.agregar(duplicado)

        self.assertIsInstance(ctx.exception, ServiceError)
        self.assertEqual(ctx.exception.producto_id, 1)
        self.assertEqual(str(ctx.exception), "Ya existe un producto con el ID 1.")
        self.assertEqual(len(inventario), 1)
        self.assertIs(inventario.buscar_por_id(1), self.laptop)

    def test_buscar_tras_agregar_conserva_descripcion(self) -> None:
        """El producto recuperado debe describirse igual que el agregado."""
        inventario = Inventario()
        inventario.agregar(self.libro)

        encontrado = inventario.buscar_por_id(3)

        self.assertIsNotNone(encontrado)
        assert encontrado is not None
        self.assertEqual(encontrado.describir(), self.libro.describir())

    def test_buscar_id_inexistente_retorna_none(self) -> None:
        """Buscar un ID ausente no es un error."""
        self.assertIsNone(Inventario().buscar_por_id(42))

    def test_eliminar_existente_preserva_orden_restante(self) -> None:
        """Eliminar ID 2 deja 1 y 3 en el orden original."""
        inventario = Inventario()
        for producto in (self.laptop, self.smartphone, self.libro):
            inventario.agregar(producto)

        self.assertTrue(inventario.eliminar_por_id(2))

        self.assertIsNone(inventario.buscar_por_id(2))
        self.assertEqual(
            inventario.listar(),
            [self.laptop.describir(), self.libro.describir()],
        )
        self.assertEqual(inventario.ids(), [1, 3])

    def test_eliminar_inexistente_retorna_false_sin_cambios(self) -> None:
        """Eliminar un ID ausente no modifica el inventario."""
        inventario = Inventario()
        inventario.agregar(self.laptop)

        self.assertFalse(inventario.eliminar_por_id(99))
        self.assertEqual(inventario.ids(), [1])

    def test_valor_total(self) -> None:
        """Debe sumar precio * cantidad de los productos actuales."""
        inventario = Inventario()
        inventario.agregar(self.laptop)
        inventario.agregar(self.libro)

        self.assertAlmostEqual(inventario.valor_total(), 4949.80, places=6)

        inventario.eliminar_por_id(1)
        self.assertAlmostEqual(inventario.valor_total(), 449.85, places=6)

    def test_protocolo_de_contenedor(self) -> None:
        """Debe soportar len, in e iteracion en orden de insercion."""
        inventario = Inventario()
        inventario.agregar(self.libro)
        inventario.agregar(self.laptop)

        self.assertEqual(len(inventario), 2)
        self.assertIn(3, inventario)
        self.assertNotIn(2, inventario)
        self.assertEqual([producto.id for producto in inventario], [3, 1])

    def test_reagregar_tras_eliminar(self) -> None:
        """Un ID eliminado puede volver a usarse y queda al final."""
        inventario = Inventario()
        inventario.agregar(self.laptop)
        inventario.agregar(self.libro)
        inventario.eliminar_por_id(1)

        inventario.agregar(self.laptop)

        self.assertEqual(inventario.ids(), [3, 1])


if __name__ == "__main__":
    unittest.main()
