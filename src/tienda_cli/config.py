"""Client settings for tienda-cli.

The remote endpoint is fixed; no environment variables or config files
are consumed.  Settings exist so that tests and embedders can point the
client somewhere else through :func:`tienda_cli.cli.app.main`.
"""

from __future__ import annotations

from dataclasses import dataclass

from tienda_cli.version import __version__

DEFAULT_BASE_URL: str = "https://fakestoreapi.com"
"""FakeStore API root."""

DEFAULT_TIMEOUT_SECONDS: float = 10.0


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Immutable connection settings for the remote catalog."""

    base_url: str = DEFAULT_BASE_URL
    """Root URL every resource path is appended to."""

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    """Total timeout applied to each request."""

    user_agent: str = f"tienda-cli/{__version__}"
    """Value of the ``User-Agent`` header."""
