"""tienda-cli — command-line client for the FakeStore product catalog.

Built on httpx and Rich with a layered cli / core / infra architecture.
"""

from tienda_cli.version import __version__

__all__: list[str] = ["__version__"]
