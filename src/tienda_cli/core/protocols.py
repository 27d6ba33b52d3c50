"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
output must satisfy.  Core code depends ONLY on these protocols — never
on concrete implementations.
"""

from __future__ import annotations

from typing import Any, Protocol

from tienda_cli.core.models import HttpRequest, HttpResponse


class HttpSender(Protocol):
    """Contract for the HTTP primitive.

    Any object that implements :meth:`send` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def send(self, request: HttpRequest) -> HttpResponse:
        """Send *request* and return the raw response.

        Non-success statuses are **not** errors at this level; they are
        returned like any other response.

        Raises
        ------
        NetworkError
            When the request could not be sent at all.
        """
        ...  # pragma: no cover


class OutputPort(Protocol):
    """Line-oriented sink for results and diagnostics."""

    def info(self, text: str = "") -> None:
        """Emit a regular output line."""
        ...  # pragma: no cover

    def error(self, text: str) -> None:
        """Emit a failure line."""
        ...  # pragma: no cover


class CatalogTransport(Protocol):
    """Contract for sending one JSON request to the remote catalog."""

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request for *path* and return the decoded JSON payload.

        Raises
        ------
        TransportError
            When the remote answers outside the 2xx range.
        NetworkError
            When the request could not be sent.
        InvalidResponseError
            When a successful response body is not JSON.
        """
        ...  # pragma: no cover
