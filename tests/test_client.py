from __future__ import annotations

import httpx
import pytest
import typer

from cli.client import ApiClient
from cli.config import load_config


def _client_with(handler) -> ApiClient:
    config = load_config(base_url="http://dashboard.test")
    client = ApiClient(config)
    client._client = httpx.Client(
        base_url=config.base_url,
        transport=httpx.MockTransport(handler),
    )
    return client


def test_get_dashboard_returns_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/dashboard"
        return httpx.Response(200, json={"running": True, "readings": []})

    client = _client_with(handler)
    try:
        assert client.get_dashboard() == {"running": True, "readings": []}
    finally:
        client.close()


def test_toggle_posts_and_returns_state() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/state/toggle"
        return httpx.Response(200, json={"running": False})

    client = _client_with(handler)
    try:
        assert client.toggle() is False
    finally:
        client.close()


def test_http_error_exits_with_detail(capsys) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "simulator unavailable"})

    client = _client_with(handler)
    try:
        with pytest.raises(typer.Exit) as excinfo:
            client.get_dashboard()
    finally:
        client.close()

    assert excinfo.value.exit_code == 1
    assert "simulator unavailable" in capsys.readouterr().err


def test_connection_error_exits(capsys) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = _client_with(handler)
    try:
        with pytest.raises(typer.Exit):
            client.get_dashboard()
    finally:
        client.close()

    assert "Could not reach http://dashboard.test" in capsys.readouterr().err


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://env.test/")
    monkeypatch.setenv("CLI_WATCH_INTERVAL", "5")
    monkeypatch.setenv("CLI_REQUEST_TIMEOUT", "nonsense")

    config = load_config()

    assert config.base_url == "http://env.test"
    assert config.watch_interval == 5.0
    assert config.request_timeout == 10.0
