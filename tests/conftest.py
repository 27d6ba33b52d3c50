"""Shared pytest fixtures and configuration for the tienda-cli test suite.

Guidelines
----------
* No internet access in any test.
* HTTP is faked at the sender boundary (or via ``httpx.MockTransport``).
* Output is recorded through a fake output port, not captured stdout.
"""

from __future__ import annotations

from typing import Any

import pytest

from tienda_cli.core.models import HttpRequest, HttpResponse


class RecordingOutput:
    """Output port that keeps every line for later assertions."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def info(self, text: str = "") -> None:
        self.lines.append(("info", text))

    def error(self, text: str) -> None:
        self.lines.append(("error", text))

    @property
    def infos(self) -> list[str]:
        return [text for kind, text in self.lines if kind == "info"]

    @property
    def errors(self) -> list[str]:
        return [text for kind, text in self.lines if kind == "error"]

    @property
    def text(self) -> str:
        return "\n".join(text for _, text in self.lines)


class ScriptedSender:
    """HttpSender fake returning a scripted response or raising an error."""

    def __init__(self, outcome: HttpResponse | BaseException) -> None:
        self.outcome = outcome
        self.requests: list[HttpRequest] = []

    def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


def json_response(status_code: int = 200, text: str = "", reason: str = "OK") -> HttpResponse:
    return HttpResponse(status_code=status_code, reason=reason, text=text)


SAMPLE_PRODUCT: dict[str, Any] = {
    "id": 1,
    "title": "Fjallraven - Foldsack No. 1 Backpack",
    "price": 109.95,
    "description": "Your perfect pack for everyday use",
    "category": "men's clothing",
    "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
    "rating": {"rate": 3.9, "count": 120},
}


@pytest.fixture()
def output() -> RecordingOutput:
    return RecordingOutput()

