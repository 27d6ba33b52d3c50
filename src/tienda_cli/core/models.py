"""Domain models for tienda-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and wire-shape conversion.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Union


# ---------------------------------------------------------------------------
# Coercion helpers (pure)
# ---------------------------------------------------------------------------

def _as_int(value: object) -> int | None:
    """Return *value* as ``int`` or ``None`` when it is not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _as_float(value: object) -> float | None:
    """Return *value* as a finite ``float`` or ``None``."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float, str)):
        try:
            number = float(value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _as_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class Operation(enum.Enum):
    """Semantic action requested on the command line."""

    LIST = "list"
    GET_BY_ID = "get_by_id"
    CREATE = "create"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class CreateRequest:
    """Body of a product creation, built transiently per invocation."""

    title: str
    price: float | str
    """Parsed finite price, or the raw token when it is not numeric."""

    category: str

    @property
    def description(self) -> str:
        """Description synthesised from title and category."""
        return f"Producto {self.title} de la categoría {self.category}"

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent to ``POST /products``."""
        return {
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
        }


@dataclass(frozen=True, slots=True)
class Command:
    """A fully resolved command line, ready for dispatch."""

    operation: Operation
    method: str
    """Normalised HTTP method (``GET``, ``POST`` or ``DELETE``)."""

    resource_path: str
    """Remote path the handler calls (``products`` or ``products/{id}``)."""

    raw_params: tuple[str, ...] = ()
    product_id: str | None = None
    create: CreateRequest | None = None

    typed_method: str = ""
    """Method exactly as typed on the command line."""

    typed_resource: str = ""
    """Resource exactly as typed on the command line."""


@dataclass(frozen=True, slots=True)
class HelpRequest:
    """Marker returned by the parser when help was asked for."""


# ---------------------------------------------------------------------------
# Product (external entity)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rating:
    rate: float | None = None
    count: int | None = None


@dataclass(frozen=True, slots=True)
class Product:
    """A catalog product as reported by the remote service.

    Every field is optional: malformed entries keep whatever could be
    read and the presenter renders placeholders for the rest.
    """

    id: int | None = None
    title: str | None = None
    price: float | None = None
    description: str | None = None
    category: str | None = None
    image: str | None = None
    rating: Rating = field(default_factory=Rating)

    @classmethod
    def from_payload(cls, raw: object) -> Product | None:
        """Build a :class:`Product` from a raw JSON object.

        Returns ``None`` when *raw* is not a JSON object at all.
        """
        if not isinstance(raw, dict):
            return None
        raw_rating = raw.get("rating")
        rating = (
            Rating(
                rate=_as_float(raw_rating.get("rate")),
                count=_as_int(raw_rating.get("count")),
            )
            if isinstance(raw_rating, dict)
            else Rating()
        )
        return cls(
            id=_as_int(raw.get("id")),
            title=_as_str(raw.get("title")),
            price=_as_float(raw.get("price")),
            description=_as_str(raw.get("description")),
            category=_as_str(raw.get("category")),
            image=_as_str(raw.get("image")),
            rating=rating,
        )


# ---------------------------------------------------------------------------
# Display models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProductList:
    """Every product returned by ``GET /products``."""

    products: tuple[Product, ...]

    def __len__(self) -> int:
        return len(self.products)

    def __bool__(self) -> bool:
        return len(self.products) > 0


@dataclass(frozen=True, slots=True)
class ProductDetail:
    """A single product; ``product`` is ``None`` when it was not found."""

    product_id: str
    product: Product | None


@dataclass(frozen=True, slots=True)
class CreationAck:
    """Remote echo of a created product, merged with the local input."""

    id: Any
    title: Any
    price: Any
    category: Any


@dataclass(frozen=True, slots=True)
class DeletionAck:
    """Deleted product id plus the raw server response, unvalidated."""

    product_id: str
    payload: Any


DisplayResult = Union[ProductList, ProductDetail, CreationAck, DeletionAck]


# ---------------------------------------------------------------------------
# HTTP exchange values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HttpRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: str | None = None


@dataclass(frozen=True, slots=True)
class HttpResponse:
    status_code: int
    reason: str
    text: str

    @property
    def ok(self) -> bool:
        """``True`` for statuses in the 2xx success range."""
        return 200 <= self.status_code < 300
