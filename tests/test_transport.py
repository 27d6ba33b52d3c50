"""Tests for the JSON transport (infra/transport.py).

The HTTP primitive is a scripted fake — no internet access.  These
tests verify URL building, header merging, body encoding, the
diagnostic line, and status / body error mapping.
"""

from __future__ import annotations

import json

import pytest

from conftest import RecordingOutput, ScriptedSender, json_response
from tienda_cli.exceptions import InvalidResponseError, NetworkError, TransportError
from tienda_cli.infra.transport import JSON_CONTENT_TYPE, Transport

BASE_URL = "https://fakestoreapi.com"


def _transport(sender: ScriptedSender, output: RecordingOutput) -> Transport:
    return Transport(sender, output, base_url=BASE_URL)


# ---------------------------------------------------------------------------
# Request construction
# ---------------------------------------------------------------------------

class TestRequestConstruction:
    def test_get_defaults(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="[]"))
        _transport(sender, output).request("products")

        (sent,) = sender.requests
        assert sent.method == "GET"
        assert sent.url == "https://fakestoreapi.com/products"
        assert sent.headers == {"Content-Type": JSON_CONTENT_TYPE}
        assert sent.body is None

    @pytest.mark.parametrize("base", [BASE_URL, BASE_URL + "/"])
    @pytest.mark.parametrize("path", ["products/7", "/products/7"])
    def test_single_slash_join(self, base: str, path: str, output: RecordingOutput) -> None:
        transport = Transport(ScriptedSender(json_response()), output, base_url=base)
        assert transport.url_for(path) == "https://fakestoreapi.com/products/7"

    def test_method_is_upper_cased(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="{}"))
        _transport(sender, output).request("products/1", method="delete")
        assert sender.requests[0].method == "DELETE"

    def test_body_is_json_encoded(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="{}"))
        body = {"title": "Camión", "price": 1.5}
        _transport(sender, output).request("products", method="POST", body=body)
        sent = sender.requests[0]
        assert sent.body is not None
        assert json.loads(sent.body) == body
        assert "Camión" in sent.body

    def test_caller_headers_are_merged(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="{}"))
        _transport(sender, output).request("products", headers={"X-Trace": "1"})
        assert sender.requests[0].headers == {
            "Content-Type": JSON_CONTENT_TYPE,
            "X-Trace": "1",
        }

    def test_explicit_content_type_wins(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="{}"))
        _transport(sender, output).request(
            "products", headers={"Content-Type": "text/plain"},
        )
        assert sender.requests[0].headers["Content-Type"] == "text/plain"

    def test_content_type_override_ignores_case(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="{}"))
        _transport(sender, output).request(
            "products", headers={"content-type": "text/plain"},
        )
        assert sender.requests[0].headers == {"content-type": "text/plain"}

    def test_diagnostic_line_before_send(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(NetworkError("down"))
        with pytest.raises(NetworkError):
            _transport(sender, output).request("products/3", method="DELETE")
        assert output.infos == [
            "🔄 Realizando petición: DELETE https://fakestoreapi.com/products/3",
        ]


# ---------------------------------------------------------------------------
# Response handling
# ---------------------------------------------------------------------------

class TestResponseHandling:
    def test_decodes_json(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text='[{"id": 1}]'))
        assert _transport(sender, output).request("products") == [{"id": 1}]

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_body_is_none(self, text: str, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text=text))
        assert _transport(sender, output).request("products/999") is None

    def test_null_body_is_none(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="null"))
        assert _transport(sender, output).request("products/999") is None

    @pytest.mark.parametrize(("status", "reason"), [(404, "Not Found"), (500, "Internal Server Error"), (400, "Bad Request")])
    def test_non_success_status(self, status: int, reason: str, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(status_code=status, reason=reason, text="{}"))
        with pytest.raises(TransportError) as info:
            _transport(sender, output).request("products")
        assert info.value.status_code == status
        assert info.value.reason == reason
        assert str(info.value) == f"Error HTTP: {status} - {reason}"

    def test_invalid_json(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(json_response(text="<html>oops</html>"))
        with pytest.raises(InvalidResponseError, match="Respuesta no válida"):
            _transport(sender, output).request("products")

    def test_network_error_propagates(self, output: RecordingOutput) -> None:
        sender = ScriptedSender(NetworkError("refused"))
        with pytest.raises(NetworkError, match="refused"):
            _transport(sender, output).request("products")
