"""Infrastructure layer — talking to the remote catalog over HTTP.

This layer wraps all interaction with httpx.  Every raw httpx exception
is caught here and re-raised as a
:class:`~tienda_cli.exceptions.TiendaError` subclass.

Rules
-----
* No imports from ``cli``.
* User-facing output only through an injected output port.
"""

from tienda_cli.infra.httpx_sender import HttpxSender
from tienda_cli.infra.transport import JSON_CONTENT_TYPE, Transport

__all__: list[str] = [
    "HttpxSender",
    "JSON_CONTENT_TYPE",
    "Transport",
]
