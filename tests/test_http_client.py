from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import httpx
import pytest

from appchains.core.errors import RemoteServiceError, TransportError
from appchains.infrastructure.http import HttpClient, HttpResponse


def _client(handler, token: str | None = None) -> tuple[HttpClient, httpx.Client]:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpClient(token, http_client=http_client), http_client


def test_get_returns_status_and_body_with_bearer_token():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(202, text="accepted")

    client, http_client = _client(handler, token="tok")

    response = client.request("get", "https://example.org/v1/x")

    assert response == HttpResponse(status_code=202, body="accepted")
    assert not response.ok
    assert captured[0].method == "GET"
    assert captured[0].headers["authorization"] == "Bearer tok"
    http_client.close()


def test_post_encodes_mapping_as_json_and_merges_headers():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, text="{}")

    client, http_client = _client(handler)

    response = client.post("https://example.org/v1/x", {"a": 1}, headers={"X-Trace": "1"})

    assert response.ok
    request = captured[0]
    assert request.content == b'{"a": 1}'
    assert request.headers["content-type"] == "application/json"
    assert request.headers["x-trace"] == "1"
    assert "authorization" not in request.headers
    http_client.close()


@pytest.mark.parametrize("method", ["PUT", "DELETE", "patch"])
def test_unsupported_methods_are_rejected(method):
    client, http_client = _client(lambda _: httpx.Response(200))

    with pytest.raises(ValueError, match="Unsupported HTTP method"):
        client.request(method, "https://example.org/")
    http_client.close()


def test_network_failures_become_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("dns failure", request=request)

    client, http_client = _client(handler)

    with pytest.raises(TransportError) as excinfo:
        client.get("https://example.org/")
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
    http_client.close()


def test_download_streams_body_to_destination(tmp_path):
    client, http_client = _client(lambda _: httpx.Response(200, content=b"%PDF-1.4 data"))

    target = client.download("https://example.org/v1/GetReportFile?id=5", tmp_path / "nested" / "r.pdf")

    assert target.read_bytes() == b"%PDF-1.4 data"
    http_client.close()


def test_download_error_status_writes_nothing(tmp_path):
    client, http_client = _client(lambda _: httpx.Response(403, text="forbidden"))

    with pytest.raises(RemoteServiceError) as excinfo:
        client.download("https://example.org/v1/GetReportFile?id=5", tmp_path / "r.pdf")

    assert excinfo.value.status_code == 403
    assert excinfo.value.body == "forbidden"
    assert not (tmp_path / "r.pdf").exists()
    http_client.close()


class _BrokenStream(httpx.SyncByteStream):
    def __iter__(self):
        yield b"%PDF-1.4 partial"
        raise httpx.ReadError("connection reset")


def test_interrupted_download_leaves_no_partial_file(tmp_path):
    client, http_client = _client(lambda _: httpx.Response(200, stream=_BrokenStream()))
    target = tmp_path / "r.pdf"

    with pytest.raises(TransportError) as excinfo:
        client.download("https://example.org/v1/GetReportFile?id=5", target)

    assert isinstance(excinfo.value.__cause__, httpx.ReadError)
    assert not target.exists()
    http_client.close()


def test_close_leaves_injected_client_open():
    http_client = httpx.Client(transport=httpx.MockTransport(lambda _: httpx.Response(200)))
    client = HttpClient(http_client=http_client)

    client.close()

    assert not http_client.is_closed
    http_client.close()
