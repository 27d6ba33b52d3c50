"""Allow ``python -m tienda_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m tienda_cli`` behaves identically to the ``tienda-cli``
console script.
"""

from __future__ import annotations

from tienda_cli.cli.app import cli

if __name__ == "__main__":
    cli()
