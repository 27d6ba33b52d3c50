"""CLI application entry point and command routing for tienda-cli.

Error boundaries
----------------
* **Operation boundary** — each catalog operation runs inside
  :func:`_run_operation`, which catches
  :class:`~tienda_cli.exceptions.ApiError`, renders it with the
  operation's context and lets the process finish normally.
* **Usage boundary** — a :class:`~tienda_cli.exceptions.UsageError`
  from the parser is rendered with the help text; still exit 0.
* **Application boundary** — :func:`main` turns anything else into the
  "unexpected error" message and exit code 1.
* **Script boundary** — :func:`cli` maps ``KeyboardInterrupt`` to 130.

No business logic lives here; parsing and response mapping are
delegated to the core layer, HTTP to the infrastructure layer.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from tienda_cli.cli import exit_codes
from tienda_cli.cli.console import RichOutput
from tienda_cli.cli.presenter import Presenter
from tienda_cli.config import ClientSettings
from tienda_cli.core.command_parser import parse_command
from tienda_cli.core.models import Command, HelpRequest, Operation
from tienda_cli.core.product_service import ProductService
from tienda_cli.core.protocols import HttpSender, OutputPort
from tienda_cli.exceptions import ApiError, UsageError


# ---------------------------------------------------------------------------
# Operation boundary
# ---------------------------------------------------------------------------

def _error_context(command: Command) -> str:
    """Describe what *command* was attempting, for failure messages."""
    if command.operation is Operation.LIST:
        return "Error al obtener los productos"
    if command.operation is Operation.GET_BY_ID:
        return f"Error al obtener el producto con ID {command.product_id}"
    if command.operation is Operation.CREATE:
        return "Error al crear el producto"
    return f"Error al eliminar el producto con ID {command.product_id}"


def _run_operation(
    service: ProductService,
    command: Command,
    presenter: Presenter,
) -> None:
    """Execute *command* and render the outcome; API failures stop here."""
    try:
        result = service.execute(command)
    except ApiError as exc:
        presenter.render_operation_error(_error_context(command), exc)
        return
    presenter.render(result)


def _build_service(
    settings: ClientSettings,
    sender: HttpSender | None,
    output: OutputPort,
) -> ProductService:
    """Wire infra adapters into the core service."""
    from tienda_cli.infra.httpx_sender import HttpxSender
    from tienda_cli.infra.transport import Transport

    transport = Transport(
        sender if sender is not None else HttpxSender(settings),
        output,
        base_url=settings.base_url,
    )
    return ProductService(transport)


class ServiceFactory:
    """Deferred :class:`ProductService` construction.

    Help and usage errors never touch the network stack, so the service
    is only built once a command has been resolved.
    """

    def __init__(
        self,
        settings: ClientSettings,
        sender: HttpSender | None,
        output: OutputPort,
    ) -> None:
        self._settings = settings
        self._sender = sender
        self._output = output

    def __call__(self) -> ProductService:
        return _build_service(self._settings, self._sender, self._output)


def _process(
    argv: Sequence[str],
    presenter: Presenter,
    service_factory: ServiceFactory,
) -> None:
    try:
        parsed = parse_command(argv)
    except UsageError as exc:
        presenter.render_usage_error(exc)
        return

    if isinstance(parsed, HelpRequest):
        presenter.render_help()
        return

    presenter.render_command(parsed)
    _run_operation(service_factory(), parsed, presenter)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    settings: ClientSettings | None = None,
    sender: HttpSender | None = None,
    output: OutputPort | None = None,
) -> int:
    """Run the tienda-cli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    settings:
        Connection settings; defaults to the public FakeStore API.
    sender:
        HTTP primitive override.  Defaults to
        :class:`~tienda_cli.infra.httpx_sender.HttpxSender`.
    output:
        Output port override.  Defaults to
        :class:`~tienda_cli.cli.console.RichOutput`.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    port: OutputPort = output if output is not None else RichOutput()
    presenter = Presenter(port)
    factory = ServiceFactory(settings or ClientSettings(), sender, port)

    presenter.render_banner()
    try:
        _process(args, presenter, factory)
    except Exception as exc:  # noqa: BLE001
        presenter.render_unexpected_error(exc)
        return exit_codes.UNEXPECTED_ERROR

    presenter.render_farewell()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point; never exits with a raw stack trace."""
    try:
        code = main()
    except KeyboardInterrupt:
        RichOutput().error("\nOperación cancelada por el usuario.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    sys.exit(code)
