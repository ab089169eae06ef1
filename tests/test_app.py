# File: tests/test_app.py

import importlib
import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from review_api.core.config import DEFAULT_JWT_SECRET, Settings
from review_api.main import check_startup_config, mount_frontend


def test_health_endpoint(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "OK"
    assert data["message"] == "Movie Review API is running"
    assert data["timestamp"]
    assert data["environment"]


def test_cors_preflight_allowed_origin(client):
    resp = client.options(
        "/auth/login",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert resp.headers["access-control-allow-credentials"] == "true"


def test_cors_unknown_origin_gets_no_allow_header(client):
    resp = client.get("/api/health", headers={"Origin": "https://evil.example.com"})
    assert "access-control-allow-origin" not in resp.headers


def test_cors_origins_from_environment_values():
    config = Settings(
        frontend_url="https://reviews.example.com/",
        render_external_hostname="api.onrender.com",
        cors_additional_origins="https://a.example.com, https://b.example.com/ ,",
    )
    origins = config.cors_origins

    assert "http://localhost:3000" in origins
    assert "https://reviews.example.com" in origins
    assert "https://api.onrender.com" in origins
    assert "https://a.example.com" in origins
    assert "https://b.example.com" in origins
    assert len(origins) == len(set(origins))
    assert not any(origin.endswith("/") for origin in origins)


def test_startup_requires_database_url():
    with pytest.raises(SystemExit) as exc_info:
        check_startup_config(Settings(database_url=None, secret_key="s3cret"))
    assert exc_info.value.code == 1


def test_startup_warns_about_default_secret(caplog):
    with caplog.at_level(logging.WARNING):
        check_startup_config(Settings(database_url="sqlite://", secret_key=DEFAULT_JWT_SECRET))
    assert "JWT_SECRET" in caplog.text


def test_startup_quiet_with_real_secret(caplog):
    with caplog.at_level(logging.WARNING):
        check_startup_config(Settings(database_url="sqlite://", secret_key="s3cret"))
    assert caplog.text == ""


def test_mount_frontend_serves_spa(tmp_path):
    (tmp_path / "index.html").write_text("<html>app</html>")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "main.js").write_text("console.log('hi')")
    (tmp_path / "favicon.ico").write_text("icon")

    app = FastAPI()
    assert mount_frontend(app, tmp_path) is True
    client = TestClient(app)

    assert client.get("/movies/42").text == "<html>app</html>"
    assert client.get("/").text == "<html>app</html>"
    assert client.get("/assets/main.js").text == "console.log('hi')"
    assert client.get("/favicon.ico").text == "icon"
    assert client.get("/api/unknown").status_code == 404


def test_mount_frontend_without_build(tmp_path):
    app = FastAPI()
    assert mount_frontend(app, tmp_path / "missing") is False


def test_empty_port_falls_back_to_default(monkeypatch):
    from review_api.core import config

    monkeypatch.setenv("PORT", "")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.Settings().port == 5000
    finally:
        monkeypatch.undo()
        importlib.reload(config)
