"""JSON transport over an injected :class:`~tienda_cli.core.protocols.HttpSender`.

Builds the URL and headers, encodes the body, announces the request on
the output port and decodes the answer.  Status checks live here so
that every sender implementation stays a thin pass-through.
"""

from __future__ import annotations

import json
from typing import Any

from tienda_cli.core.models import HttpRequest
from tienda_cli.core.protocols import HttpSender, OutputPort
from tienda_cli.exceptions import InvalidResponseError, TransportError

JSON_CONTENT_TYPE: str = "application/json"


class Transport:
    """Satisfies :class:`~tienda_cli.core.protocols.CatalogTransport`.

    Parameters
    ----------
    sender:
        The HTTP primitive used to send each request.
    output:
        Port receiving the diagnostic line emitted before each send.
    base_url:
        Root URL every path is appended to.
    """

    def __init__(
        self,
        sender: HttpSender,
        output: OutputPort,
        *,
        base_url: str,
    ) -> None:
        self._sender: HttpSender = sender
        self._output: OutputPort = output
        self._base_url: str = base_url.rstrip("/")

    def url_for(self, path: str) -> str:
        """Join *path* onto the base URL with exactly one slash."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON payload.

        An empty successful body decodes to ``None``.

        Raises
        ------
        TransportError
            When the response status is outside 200-299.
        NetworkError
            When the sender cannot reach the remote.
        InvalidResponseError
            When a successful body is not valid JSON.
        """
        merged_headers = _merge_headers({"Content-Type": JSON_CONTENT_TYPE}, headers or {})

        encoded = json.dumps(body, ensure_ascii=False) if body is not None else None
        http_request = HttpRequest(
            method=method.upper(),
            url=self.url_for(path),
            headers=merged_headers,
            body=encoded,
        )

        self._output.info(
            f"🔄 Realizando petición: {http_request.method} {http_request.url}"
        )
        response = self._sender.send(http_request)

        if not response.ok:
            raise TransportError(response.status_code, response.reason)

        if not response.text.strip():
            return None
        try:
            return json.loads(response.text)
        except ValueError as exc:
            raise InvalidResponseError(
                f"Respuesta no válida de {http_request.url}: {exc}",
            ) from exc


def _merge_headers(base: dict[str, str], extra: dict[str, str]) -> dict[str, str]:
    """Overlay *extra* on *base*; header names compare case-insensitively."""
    merged = dict(base)
    for name, value in extra.items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged
