"""Command-line interpretation — raw argv to a resolved :class:`Command`.

Every function in this module is a **pure** transformation: no I/O, no
network, fully deterministic.

Shapes accepted
---------------
* ``GET products``                       → list
* ``GET products <id>``                  → single product
* ``GET products/<id>``                  → single product
* ``POST products <title...> <price> <category>`` → create
* ``DELETE products/<id>``               → delete
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import replace

from tienda_cli.core.models import Command, CreateRequest, HelpRequest, Operation
from tienda_cli.exceptions import UsageError

PRODUCTS: str = "products"
VALID_METHODS: tuple[str, ...] = ("GET", "POST", "DELETE")
HELP_WORDS: frozenset[str] = frozenset({"help", "--help"})

CREATE_EXAMPLE: str = 'tienda-cli POST products "Mi Producto" 29.99 electronics'


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_command(argv: Sequence[str]) -> Command | HelpRequest:
    """Resolve *argv* (program name excluded) into a command.

    Raises
    ------
    UsageError
        When the arguments do not describe a supported command.
    """
    if not argv or argv[0] in HELP_WORDS:
        return HelpRequest()

    if len(argv) < 2 or not argv[0] or not argv[1]:
        raise UsageError("Debes especificar un método y recurso")

    method, resource, *rest = argv
    params = tuple(rest)

    normalized = method.upper()
    if normalized == "GET":
        command = _resolve_get(resource, params)
    elif normalized == "POST":
        command = _resolve_post(resource, params)
    elif normalized == "DELETE":
        command = _resolve_delete(resource, params)
    else:
        raise UsageError(
            f'Método "{method}" no válido',
            hint=f"Métodos disponibles: {', '.join(VALID_METHODS)}",
        )
    return replace(command, typed_method=method, typed_resource=resource)


def split_create_params(params: Sequence[str]) -> tuple[str, str, str]:
    """Split POST parameters into ``(title, price, category)``.

    Positions are counted from the end of *params*: the last token is
    the category, the one before it the price, and every token before
    those forms the title, joined with single spaces.

    ====  =================================  ===============================
    len   params                             result
    ====  =================================  ===============================
    3     ``A 10 c``                          ``("A", "10", "c")``
    4     ``T-Shirt Rex 300 remeras``         ``("T-Shirt Rex", "300", "remeras")``
    5     ``A B C 10 c``                      ``("A B C", "10", "c")``
    ====  =================================  ===============================

    Raises
    ------
    UsageError
        When fewer than three parameters are given.
    """
    if len(params) < 3:
        raise UsageError(
            "Debes proporcionar título, precio y categoría",
            hint=f"Ejemplo: {CREATE_EXAMPLE}",
        )
    title = " ".join(params[:-2])
    return title, params[-2], params[-1]


def parse_price(raw: str) -> float | str:
    """Return *raw* as a finite float, or unchanged when it is not numeric.

    Rejecting a bad price is left to the remote service.
    """
    try:
        value = float(raw)
    except ValueError:
        return raw
    return value if math.isfinite(value) else raw


# ---------------------------------------------------------------------------
# Per-method resolution
# ---------------------------------------------------------------------------

def _id_from_resource(resource: str) -> str | None:
    """Return the id segment of ``products/<id>``, or ``None`` if absent."""
    _, _, remainder = resource.partition("/")
    product_id = remainder.split("/", 1)[0]
    return product_id or None


def _resolve_get(resource: str, params: tuple[str, ...]) -> Command:
    if resource == PRODUCTS:
        if not params:
            return Command(
                operation=Operation.LIST,
                method="GET",
                resource_path=PRODUCTS,
                raw_params=params,
            )
        if len(params) == 1:
            return _by_id(Operation.GET_BY_ID, "GET", params[0], params)
        raise UsageError("Parámetros incorrectos para GET products")

    if resource.startswith(f"{PRODUCTS}/"):
        product_id = _id_from_resource(resource)
        if product_id is None:
            raise UsageError("Debes especificar el ID del producto")
        return _by_id(Operation.GET_BY_ID, "GET", product_id, params)

    raise UsageError('Recurso no válido. Use "products" o "products/<id>"')


def _resolve_post(resource: str, params: tuple[str, ...]) -> Command:
    if resource != PRODUCTS:
        raise UsageError('Recurso no válido. Use "products"')

    title, raw_price, category = split_create_params(params)
    return Command(
        operation=Operation.CREATE,
        method="POST",
        resource_path=PRODUCTS,
        raw_params=params,
        create=CreateRequest(
            title=title,
            price=parse_price(raw_price),
            category=category,
        ),
    )


def _resolve_delete(resource: str, params: tuple[str, ...]) -> Command:
    if not resource.startswith(f"{PRODUCTS}/"):
        raise UsageError("Formato incorrecto. Use DELETE products/<id>")

    product_id = _id_from_resource(resource)
    if product_id is None:
        raise UsageError("Debes especificar el ID del producto a eliminar")
    return _by_id(Operation.DELETE, "DELETE", product_id, params)


def _by_id(
    operation: Operation,
    method: str,
    product_id: str,
    params: tuple[str, ...],
) -> Command:
    return Command(
        operation=operation,
        method=method,
        resource_path=f"{PRODUCTS}/{product_id}",
        raw_params=params,
        product_id=product_id,
    )
