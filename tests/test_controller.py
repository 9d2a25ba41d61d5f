"""Tests de AppController sobre el gateway local."""

from __future__ import annotations

import unittest
from unittest import mock

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from servidor.services.inventario import SIN_PRODUCTOS, Inventario
from shared.errors import DuplicateIdError, InvalidArgumentError, ServiceError
from shared.protocol import AgregarProductoRequest, ProductoDraft


class AppControllerTests(unittest.TestCase):
    """Valida las acciones del controller y la traduccion de errores."""

    def setUp(self) -> None:
        self.inventario = Inventario()
        self.gateway = LocalServerGateway(inventario=self.inventario)
        self.controller = AppController(gateway=self.gateway)

    def test_cargar_demo_agrega_catalogo(self) -> None:
        """Debe agregar los cuatro productos de ejemplo."""
        self.assertEqual(self.controller.cargar_demo(), 4)
        self.assertEqual(self.inventario.ids(), [1, 2, 3, 4])
        self.assertEqual(self.controller.valor_total_formateado(), "$12,324.70")

    def test_cargar_demo_dos_veces_omite_duplicados(self) -> None:
        """Una segunda carga no debe fallar ni duplicar productos."""
        self.controller.cargar_demo()

        with self.assertLogs("cliente.backend.controller", level="WARNING"):
            self.assertEqual(self.controller.cargar_demo(), 0)
        self.assertEqual(len(self.inventario), 4)

    def test_agregar_producto_retorna_descripcion(self) -> None:
        """Debe retornar la descripcion del producto agregado."""
        descripcion = self.controller.agregar_producto(
            ProductoDraft(tipo="generico", id=10, nombre="Mouse", precio=5, cantidad=2)
        )

        self.assertEqual(
            descripcion,
            "ID: 10 | Producto: Mouse | Precio: $5.00 | Cantidad: 2",
        )
        self.assertEqual(self.controller.listar_productos(), [descripcion])

    def test_agregar_duplicado_propaga_error(self) -> None:
        """El error de ID duplicado llega intacto al caller."""
        draft = ProductoDraft(tipo="generico", id=10, nombre="Mouse", precio=5, cantidad=2)
        self.controller.agregar_producto(draft)

        with self.assertRaises(DuplicateIdError):
            self.controller.agregar_producto(draft)

    def test_agregar_invalido_propaga_error(self) -> None:
        """El error de argumento invalido llega intacto al caller."""
        with self.assertRaises(InvalidArgumentError):
            self.controller.agregar_producto(
                ProductoDraft(tipo="generico", id=0, nombre="Mouse", precio=5, cantidad=2)
            )
        self.assertEqual(self.controller.listar_productos(), [SIN_PRODUCTOS])

    def test_buscar_incluye_mensaje_exclusivo(self) -> None:
        """Buscar un libro debe traer su recomendacion de lectura."""
        self.controller.cargar_demo()

        response = self.controller.buscar_producto(3)

        self.assertIsNotNone(response.descripcion)
        self.assertIn("Autor: Gabriel García Márquez", response.descripcion or "")
        self.assertEqual(
            response.mensaje_exclusivo,
            "Este libro es altamente recomendado para los amantes de la literatura.",
        )

    def test_buscar_inexistente(self) -> None:
        """Buscar un ID ausente retorna descripcion None."""
        response = self.controller.buscar_producto(99)

        self.assertIsNone(response.descripcion)
        self.assertIsNone(response.mensaje_exclusivo)

    def test_eliminar_producto(self) -> None:
        """Eliminar retorna True solo para IDs existentes."""
        self.controller.cargar_demo()

        self.assertTrue(self.controller.eliminar_producto(2))
        self.assertFalse(self.controller.eliminar_producto(2))
        self.assertEqual(self.inventario.ids(), [1, 3, 4])

    def test_error_inesperado_se_envuelve_en_service_error(self) -> None:
        """Errores no previstos del inventario se convierten en ServiceError."""
        with mock.patch.object(self.inventario, "agregar", side_effect=RuntimeError("boom")):
            with self.assertLogs("cliente.backend.gateway", level="ERROR"):
                with self.assertRaises(ServiceError) as ctx:
                    self.gateway.agregar_producto(
                        AgregarProductoRequest(
                            producto=ProductoDraft(
                                tipo="generico", id=1, nombre="X", precio=1, cantidad=1
                            )
                        )
                    )

        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_on_exit_con_callable(self) -> None:
        """Debe invocar el callable de salida."""
        salida = mock.Mock()

        self.controller.on_exit(salida)

        salida.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
