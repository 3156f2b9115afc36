"""Tests for the FastAPI surface (dispatcher swapped for in-memory fakes)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.fakes import FakeGeocoder, InMemoryDirectory, RecordingReply
from tetramap.config import Settings
from tetramap.domain.errors import ConfigurationError
from tetramap.infrastructure.api.dependencies import build_dispatcher, get_dispatcher
from tetramap.main import create_app

TOKEN = "bridge-token"


def _settings(**overrides) -> Settings:
    values = dict(
        _env_file=None,
        geocoder_provider="google",
        google_maps_token="maps-key",
        storage_backend="postgrest",
        supabase_endpoint="https://project.supabase.co/rest/v1",
        supabase_token="service-token",
        database_url="",
        command_token=TOKEN,
        chat_webhook_url="",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def fakes():
    return FakeGeocoder(), InMemoryDirectory(), RecordingReply()


@pytest.fixture
def client(fakes):
    app = create_app(_settings())
    app.dependency_overrides[get_dispatcher] = lambda: build_dispatcher(*fakes)
    with TestClient(app) as c:
        yield c


def _auth() -> dict[str, str]:
    return {"Authorization": f"Bearer {TOKEN}"}


def _body(text: str = "", author_id: str = "42") -> dict:
    return {"author_id": author_id, "author_display_name": "amp", "argument_text": text, "channel_id": "c1"}


def test_location_command(client, fakes):
    _, directory, reply = fakes

    response = client.post("/api/commands/location", json=_body("London"), headers=_auth())

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["command"] == "location"
    assert "51.5074, -0.1278" in data["reply"]
    assert list(directory.records) == ["42"]
    assert reply.sent == [("c1", data["reply"])]


def test_location_not_found_is_still_200(client, fakes):
    response = client.post("/api/commands/location", json=_body("zzzznotaplace"), headers=_auth())

    assert response.status_code == 200
    assert response.json()["error"] == "LocationNotFound"
    assert fakes[1].records == {}


def test_clear_command_without_record(client):
    response = client.post("/api/commands/clear", json=_body(), headers=_auth())

    assert response.status_code == 200
    assert response.json() == {"command": "clear", "ok": True, "reply": "Location cleared.", "error": None}


def test_flight_command(client, fakes):
    response = client.post("/api/commands/flight", json=_body("BA117"), headers=_auth())
    assert response.json()["reply"] == "Flight BA117 received."


def test_unknown_command_is_404(client):
    response = client.post("/api/commands/journey", json=_body(), headers=_auth())
    assert response.status_code == 404


@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": "Bearer wrong"},
    {"Authorization": "Bearer bridge-toke"},
    {"Authorization": "Bearer bridge-token-extra"},
])
def test_commands_require_token(client, fakes, headers):
    response = client.post("/api/commands/location", json=_body("London"), headers=headers)

    assert response.status_code == 401
    assert fakes[0].queries == []


def test_missing_author_is_422(client):
    response = client.post(
        "/api/commands/location",
        json={"author_id": "", "author_display_name": "amp", "argument_text": "London"},
        headers=_auth(),
    )
    assert response.status_code == 422


def test_help_listing(client):
    response = client.get("/api/commands")

    assert response.status_code == 200
    names = [c["name"] for c in response.json()["commands"]]
    assert names == ["location", "clear", "flight"]


def test_health(client):
    data = client.get("/api/health").json()
    assert data["status"] == "ok"
    assert data["geocoder"] == "google"
    assert data["storage"] == "postgrest"


def test_missing_credentials_are_fatal():
    with pytest.raises(ConfigurationError) as exc:
        create_app(_settings(supabase_token="", command_token=""))

    assert "SUPABASE_TOKEN" in str(exc.value)
    assert "COMMAND_TOKEN" in str(exc.value)
