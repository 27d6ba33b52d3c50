"""Text rendering of display models, help and diagnostics.

The :class:`Presenter` only formats: every decision about *what* to show
has already been made by the core layer.  Output goes through an
injected :class:`~tienda_cli.core.protocols.OutputPort`, so the layout
can be asserted line by line in tests.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from tienda_cli.core.models import (
    Command,
    CreationAck,
    DeletionAck,
    DisplayResult,
    Product,
    ProductDetail,
    ProductList,
)
from tienda_cli.core.protocols import OutputPort
from tienda_cli.exceptions import TiendaError

PLACEHOLDER: str = "N/D"
"""Shown in place of a field the remote did not provide."""

HEAVY_RULE: str = "=" * 50
LIGHT_RULE: str = "-" * 40
COMMAND_RULE: str = "=" * 30

HELP_LINES: tuple[str, ...] = (
    "",
    "🚀 TIENDA ONLINE CLI - AYUDA",
    HEAVY_RULE,
    "📖 Comandos disponibles:",
    "",
    "📦 Obtener todos los productos:",
    "   tienda-cli GET products",
    "",
    "🔍 Obtener un producto específico:",
    "   tienda-cli GET products/<productId>",
    "   Ejemplo: tienda-cli GET products/15",
    "",
    "➕ Crear un nuevo producto:",
    "   tienda-cli POST products <title> <price> <category>",
    "   Ejemplo: tienda-cli POST products T-Shirt-Rex 300 remeras",
    "",
    "🗑️  Eliminar un producto:",
    "   tienda-cli DELETE products/<productId>",
    "   Ejemplo: tienda-cli DELETE products/7",
    "",
    "❓ Mostrar esta ayuda:",
    "   tienda-cli help",
    "",
    HEAVY_RULE,
)


# ---------------------------------------------------------------------------
# Field formatting (pure)
# ---------------------------------------------------------------------------

def format_value(value: object) -> str:
    """Render a scalar, using :data:`PLACEHOLDER` for missing values."""
    if value is None or value == "":
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(value: object) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    return f"${format_value(value)}"


def format_rating(product: Product) -> str:
    """Render ``"3.9 (120 reseñas)"``."""
    rating = product.rating
    return f"{format_value(rating.rate)} ({format_value(rating.count)} reseñas)"


def format_payload(payload: object) -> str:
    """Render a raw server payload as compact JSON."""
    return json.dumps(payload, ensure_ascii=False, default=str)


# ---------------------------------------------------------------------------
# Presenter
# ---------------------------------------------------------------------------

class Presenter:
    """Render display models and CLI messages on an output port."""

    def __init__(self, output: OutputPort) -> None:
        self._out: OutputPort = output

    # ------------------------------------------------------------------
    # Display models
    # ------------------------------------------------------------------

    def render(self, result: DisplayResult) -> None:
        """Dispatch on the display model variant."""
        if isinstance(result, ProductList):
            self.render_product_list(result)
        elif isinstance(result, ProductDetail):
            self.render_product_detail(result)
        elif isinstance(result, CreationAck):
            self.render_creation(result)
        elif isinstance(result, DeletionAck):
            self.render_deletion(result)
        else:
            raise TypeError(f"Unsupported display result: {type(result).__name__}")

    def render_product_list(self, result: ProductList) -> None:
        self._header("📦 LISTA COMPLETA DE PRODUCTOS")
        for product in result.products:
            self._out.info()
            self._out.info(f"🆔 ID: {format_value(product.id)}")
            self._out.info(f"📝 Título: {format_value(product.title)}")
            self._out.info(f"💰 Precio: {format_price(product.price)}")
            self._out.info(f"🏷️  Categoría: {format_value(product.category)}")
            self._out.info(f"⭐ Rating: {format_rating(product)}")
            self._out.info(LIGHT_RULE)
        self._out.info()
        self._out.info(f"✅ Total de productos encontrados: {len(result)}")

    def render_product_detail(self, result: ProductDetail) -> None:
        product = result.product
        if product is None:
            self._out.info()
            self._out.info(f"⚠️  Producto con ID {result.product_id} no encontrado")
            return

        self._header("📦 DETALLES DEL PRODUCTO")
        self._out.info(f"🆔 ID: {format_value(product.id)}")
        self._out.info(f"📝 Título: {format_value(product.title)}")
        self._out.info(f"💰 Precio: {format_price(product.price)}")
        self._out.info(f"🏷️  Categoría: {format_value(product.category)}")
        self._out.info(f"📖 Descripción: {format_value(product.description)}")
        self._out.info(f"🖼️  Imagen: {format_value(product.image)}")
        self._out.info(f"⭐ Rating: {format_rating(product)}")
        self._out.info()
        self._out.info("✅ Producto encontrado exitosamente")

    def render_creation(self, result: CreationAck) -> None:
        self._header("🎉 PRODUCTO CREADO EXITOSAMENTE")
        self._out.info(f"🆔 ID: {format_value(result.id)}")
        self._out.info(f"📝 Título: {format_value(result.title)}")
        self._out.info(f"💰 Precio: {format_price(result.price)}")
        self._out.info(f"🏷️  Categoría: {format_value(result.category)}")
        self._out.info()
        self._out.info("✅ El producto ha sido agregado al catálogo")

    def render_deletion(self, result: DeletionAck) -> None:
        self._header("🗑️  PRODUCTO ELIMINADO")
        self._out.info(f"🆔 ID eliminado: {result.product_id}")
        self._out.info(f"📋 Respuesta del servidor: {format_payload(result.payload)}")
        self._out.info()
        self._out.info("✅ El producto ha sido eliminado del catálogo")

    # ------------------------------------------------------------------
    # CLI chrome
    # ------------------------------------------------------------------

    def render_banner(self) -> None:
        self._out.info()
        self._out.info("🌟 BIENVENIDO A TIENDA ONLINE CLI")
        self._out.info("🛍️  Sistema de Gestión de Productos")
        self._out.info("🔗 Conectado a FakeStore API")

    def render_farewell(self) -> None:
        self._out.info()
        self._out.info("👋 ¡Gracias por usar Tienda Online CLI!")

    def render_help(self) -> None:
        for line in HELP_LINES:
            self._out.info(line)

    def render_command(self, command: Command) -> None:
        """Echo the command as it was typed, before it runs."""
        self._out.info()
        self._out.info("🎯 EJECUTANDO COMANDO")
        self._out.info(COMMAND_RULE)
        self._out.info(f"📝 Método: {command.typed_method or command.method}")
        self._out.info(f"📋 Recurso: {command.typed_resource or command.resource_path}")
        self._out.info(f"📊 Parámetros: {_format_params(command.raw_params)}")
        self._out.info(COMMAND_RULE)

    # ------------------------------------------------------------------
    # Failures
    # ------------------------------------------------------------------

    def render_usage_error(self, exc: TiendaError) -> None:
        """Show a usage error followed by the help text."""
        self._out.error(f"❌ Error: {exc}")
        if exc.hint:
            self._out.info(f"💡 {exc.hint}")
        self.render_help()

    def render_operation_error(self, context: str, exc: TiendaError) -> None:
        """Show an API failure prefixed with what was being attempted."""
        self._out.error(f"❌ {context}: {exc}")
        if exc.hint:
            self._out.info(f"💡 {exc.hint}")

    def render_unexpected_error(self, exc: BaseException) -> None:
        self._out.error(f"💥 Error inesperado en la aplicación: {exc}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _header(self, title: str) -> None:
        self._out.info()
        self._out.info(title)
        self._out.info(HEAVY_RULE)


def _format_params(params: Sequence[str]) -> str:
    return "[" + ", ".join(f"'{param}'" for param in params) + "]"
