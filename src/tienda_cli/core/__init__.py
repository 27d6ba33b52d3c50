"""Core / service layer — command resolution and response mapping.

Rules
-----
* No ``print()`` calls.
* No direct network I/O; requests go through an injected transport.
* No imports from ``cli`` or ``infra``.
"""

from tienda_cli.core.command_parser import parse_command, parse_price, split_create_params
from tienda_cli.core.models import (
    Command,
    CreateRequest,
    CreationAck,
    DeletionAck,
    DisplayResult,
    HelpRequest,
    Operation,
    Product,
    ProductDetail,
    ProductList,
    Rating,
)
from tienda_cli.core.product_service import ProductService
from tienda_cli.core.protocols import CatalogTransport, HttpSender, OutputPort

__all__: list[str] = [
    "CatalogTransport",
    "Command",
    "CreateRequest",
    "CreationAck",
    "DeletionAck",
    "DisplayResult",
    "HelpRequest",
    "HttpSender",
    "Operation",
    "OutputPort",
    "Product",
    "ProductDetail",
    "ProductList",
    "ProductService",
    "Rating",
    "parse_command",
    "parse_price",
    "split_create_params",
]
