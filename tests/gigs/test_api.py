"""FastAPI service over the harness."""
import pytest
from fastapi.testclient import TestClient

from app.api import gigs as gigs_api
from app.main import app

from fakes import fake_factories


@pytest.fixture
def client(monkeypatch, settings):
    monkeypatch.setattr(gigs_api, "load_settings", lambda: settings)
    monkeypatch.setattr(gigs_api, "default_factories", fake_factories)
    return TestClient(app)


def test_root(client):
    assert client.get("/").json()["status"] == "ok"


def test_cases(client):
    response = client.get("/api/gigs/cases", params={"series": [3209]})
    assert response.status_code == 200
    assert [case["id"] for case in response.json()] == ["3209.66601", "3209.66602", "3209.66603"]


def test_report_missing(client):
    assert client.get("/api/gigs/report").status_code == 404
    assert client.get("/api/gigs/report/html").status_code == 404


def test_run_then_fetch_reports(client):
    response = client.post("/api/gigs/run", json={"series": [3202, 3209]})
    assert response.status_code == 200
    payload = response.json()
    assert payload["summary"]["total"] == len(payload["tests"])
    assert payload["summary"]["fail"] == 0
    assert {test["series"] for test in payload["tests"]} == {3202, 3209}

    report = client.get("/api/gigs/report")
    assert report.status_code == 200
    assert report.json()["summary"] == payload["summary"]

    page = client.get("/api/gigs/report/html")
    assert page.status_code == 200
    assert "3209.66601" in page.text


def test_run_with_option_overrides(client, monkeypatch):
    monkeypatch.setattr(gigs_api, "default_factories", lambda: fake_factories(scale=1.001))
    strict = client.post("/api/gigs/run", json={"series": [3202]}).json()
    assert strict["summary"]["fail"] > 0

    relaxed = client.post(
        "/api/gigs/run",
        json={"series": [3202], "options": {"factory_preserving_user_values": False}},
    ).json()
    assert relaxed["summary"]["fail"] == 0
