"""Core product service — one handler per supported operation.

The service depends on a :class:`~tienda_cli.core.protocols.CatalogTransport`
injected at construction time, keeping the core free of any HTTP
library imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~tienda_cli.exceptions.TiendaError` subclasses escape.
* Raw payloads are mapped to display models here, never in the CLI.
"""

from __future__ import annotations

from typing import Any

from tienda_cli.core.command_parser import PRODUCTS
from tienda_cli.core.models import (
    Command,
    CreateRequest,
    CreationAck,
    DeletionAck,
    DisplayResult,
    Operation,
    Product,
    ProductDetail,
    ProductList,
)
from tienda_cli.core.protocols import CatalogTransport
from tienda_cli.exceptions import InvalidResponseError


class ProductService:
    """Stateless service that runs catalog operations.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`CatalogTransport` protocol.
    """

    def __init__(self, transport: CatalogTransport) -> None:
        self._transport: CatalogTransport = transport

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def execute(self, command: Command) -> DisplayResult:
        """Run the handler matching ``command.operation``."""
        if command.operation is Operation.LIST:
            return self.list_products()
        if command.operation is Operation.GET_BY_ID:
            return self.get_product(_require(command.product_id))
        if command.operation is Operation.CREATE:
            return self.create_product(_require(command.create))
        if command.operation is Operation.DELETE:
            return self.delete_product(_require(command.product_id))
        raise ValueError(f"Unsupported operation: {command.operation!r}")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def list_products(self) -> ProductList:
        """Fetch every product.

        Raises
        ------
        InvalidResponseError
            If the remote answers with something other than a JSON array.
        """
        payload = self._transport.request(PRODUCTS)
        if not isinstance(payload, list):
            raise InvalidResponseError(
                "La respuesta de la API no es una lista de productos",
            )
        products = tuple(
            Product.from_payload(entry) or Product() for entry in payload
        )
        return ProductList(products=products)

    def get_product(self, product_id: str) -> ProductDetail:
        """Fetch a single product; an empty answer (including ``{}``) means not found."""
        payload = self._transport.request(f"{PRODUCTS}/{product_id}")
        return ProductDetail(
            product_id=product_id,
            product=Product.from_payload(payload) if payload else None,
        )

    def create_product(self, request: CreateRequest) -> CreationAck:
        """Create a product and merge the remote echo with *request*.

        Test backends may not persist the data and echo back only part
        of it, so every missing field falls back to the local value.
        """
        payload: Any = self._transport.request(
            PRODUCTS,
            method="POST",
            body=request.to_payload(),
        )
        echo: dict[str, Any] = payload if isinstance(payload, dict) else {}
        return CreationAck(
            id=echo.get("id"),
            title=echo.get("title") or request.title,
            price=echo.get("price") or request.price,
            category=echo.get("category") or request.category,
        )

    def delete_product(self, product_id: str) -> DeletionAck:
        """Delete a product; the server answer is kept verbatim."""
        payload = self._transport.request(
            f"{PRODUCTS}/{product_id}",
            method="DELETE",
        )
        return DeletionAck(product_id=product_id, payload=payload)


def _require(value: Any) -> Any:
    if value is None:
        raise ValueError("Command is missing the data its operation needs")
    return value
