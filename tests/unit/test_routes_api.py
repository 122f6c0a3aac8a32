"""Tests for the route listing endpoint and CLI command."""

import asyncio
import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from webhook_dispatcher.config import Settings
from webhook_dispatcher.main import create_app, print_routes

ROUTES_TOML = """
[acme]
target = "https://sink.example/acme"
events = ["push"]

[acme.widgets]
target = "https://sink.example/a"

[octo.tools]
target = "https://sink.example/tools"
"""

EXPECTED_TEXT = (
    "acme -> https://sink.example/acme\n"
    "acme/widgets -> https://sink.example/a\n"
    "octo/tools -> https://sink.example/tools"
)

EXPECTED_JSON = [
    {"owner": "acme", "target": "https://sink.example/acme"},
    {"owner": "acme", "repo": "widgets", "target": "https://sink.example/a"},
    {"owner": "octo", "repo": "tools", "target": "https://sink.example/tools"},
]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    route_file = tmp_path / "routes.toml"
    route_file.write_text(ROUTES_TOML, encoding="utf-8")
    return Settings(route_file=route_file, webhook_secret="unused")


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


def test_list_routes_text(client: TestClient):
    """Test the default plain text listing."""
    response = client.get("/routes")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == EXPECTED_TEXT


def test_list_routes_json(client: TestClient):
    """Test the JSON listing."""
    response = client.get("/routes", params={"format": "json"})

    assert response.status_code == 200
    assert response.json() == EXPECTED_JSON


def test_list_routes_unknown_format_falls_back_to_text(client: TestClient):
    """Test that other format values give the text listing."""
    assert client.get("/routes", params={"format": "xml"}).text == EXPECTED_TEXT


def test_list_routes_empty_table(settings: Settings, client: TestClient):
    """Test listing an empty route file."""
    settings.route_file.write_text("", encoding="utf-8")

    assert client.get("/routes").text == ""
    assert client.get("/routes", params={"format": "json"}).json() == []


def test_list_routes_missing_file(tmp_path: Path):
    """Test that an unreadable route file gives a generic 500."""
    client = TestClient(create_app(Settings(route_file=tmp_path / "missing.yaml")))

    response = client.get("/routes")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}


def test_print_routes_text(settings: Settings, capsys: pytest.CaptureFixture[str]):
    """Test the routes CLI command text output."""
    assert print_routes(settings, "text") == 0
    assert capsys.readouterr().out.strip() == EXPECTED_TEXT


def test_print_routes_json(settings: Settings, capsys: pytest.CaptureFixture[str]):
    """Test the routes CLI command JSON output."""
    assert print_routes(settings, "json") == 0
    assert json.loads(capsys.readouterr().out) == EXPECTED_JSON


def test_print_routes_configuration_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    """Test that the CLI reports configuration errors with a non-zero exit."""
    settings = Settings(route_file=tmp_path / "routes.txt")
    (tmp_path / "routes.txt").write_text("x", encoding="utf-8")

    assert print_routes(settings, "text") == 1
    assert "not in TOML, JSON, or YAML format" in capsys.readouterr().err


def test_list_routes_reads_file_off_event_loop(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
):
    """Test that the route file is loaded in a worker thread."""
    loops: list[bool] = []

    def fake_load(route_file):
        try:
            asyncio.get_running_loop()
            loops.append(True)
        except RuntimeError:
            loops.append(False)
        return {}

    monkeypatch.setattr("webhook_dispatcher.routing.api.load_route_table", fake_load)

    assert client.get("/routes").status_code == 200
    assert loops == [False]
