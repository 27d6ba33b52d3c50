"""httpx backed implementation of :class:`~tienda_cli.core.protocols.HttpSender`.

This module is the **only** place in the codebase that imports
``httpx``.  All httpx exceptions are caught here and re-raised as
:class:`~tienda_cli.exceptions.NetworkError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

from typing import Any

import httpx

from tienda_cli.config import ClientSettings
from tienda_cli.core.models import HttpRequest, HttpResponse
from tienda_cli.exceptions import NetworkError


class HttpxSender:
    """Concrete :class:`HttpSender` backed by a short-lived ``httpx.Client``.

    Usage::

        sender = HttpxSender(ClientSettings())
        response = sender.send(HttpRequest("GET", url, headers={}))

    A client is opened for each request and closed as soon as the
    response has been read, on success or error.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings: ClientSettings = settings or ClientSettings()
        self._transport: httpx.BaseTransport | None = transport
        """Optional httpx transport override (``httpx.MockTransport`` in tests)."""

    def _build_client(self) -> httpx.Client:
        options: dict[str, Any] = {
            "timeout": httpx.Timeout(self._settings.timeout_seconds),
            "follow_redirects": True,
            "headers": {"User-Agent": self._settings.user_agent},
        }
        if self._transport is not None:
            options["transport"] = self._transport
        return httpx.Client(**options)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def send(self, request: HttpRequest) -> HttpResponse:
        """Send *request* and return status, reason phrase and body text.

        Raises
        ------
        NetworkError
            For any httpx error raised while sending.
        """
        try:
            with self._build_client() as client:
                response = client.request(
                    request.method,
                    request.url,
                    headers=request.headers,
                    content=request.body.encode("utf-8") if request.body is not None else None,
                )
                return HttpResponse(
                    status_code=response.status_code,
                    reason=response.reason_phrase,
                    text=response.text,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(
                f"No se pudo conectar con {request.url}: {exc}",
                hint="Revisa tu conexión a internet e inténtalo de nuevo.",
            ) from exc
