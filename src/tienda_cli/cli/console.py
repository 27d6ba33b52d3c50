"""Rich-backed output port with a plain ``print`` fallback.

This module avoids module-level imports of Rich so that help output
keeps working even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from tienda_cli.exceptions import EnvironmentError

_LITERAL: dict[str, bool] = {
	"markup": False,
	"highlight": False,
	"emoji": False,
	"soft_wrap": True,
}


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class RichOutput:
	"""Satisfies :class:`~tienda_cli.core.protocols.OutputPort`.

	Regular lines go to stdout, failure lines to stderr in red.  Text is
	printed literally: product titles may contain square brackets or
	colons, so Rich markup, emoji codes and highlighting are disabled.
	"""

	def __init__(self) -> None:
		self._out: Any | None = None
		self._err: Any | None = None
		self._rich_available: bool = True

	def _console(self, *, stderr: bool) -> Any | None:
		if not self._rich_available:
			return None
		if stderr:
			if self._err is None:
				self._err = self._load(stderr=True)
			return self._err
		if self._out is None:
			self._out = self._load(stderr=False)
		return self._out

	def _load(self, *, stderr: bool) -> Any | None:
		try:
			return get_rich_console(stderr=stderr)
		except EnvironmentError:
			self._rich_available = False
			return None

	def info(self, text: str = "") -> None:
		"""Render with Rich when available, else plain stdout print."""
		console = self._console(stderr=False)
		if console is None:
			print(text)
			return
		console.print(text, **_LITERAL)

	def error(self, text: str) -> None:
		"""Render in red on stderr, or plain stderr print without Rich."""
		console = self._console(stderr=True)
		if console is None:
			print(text, file=sys.stderr)
			return
		console.print(text, style="bold red", **_LITERAL)
