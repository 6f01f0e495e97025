"""
Tests for the root redirect and the login page.
"""
import logging

from fastapi.testclient import TestClient

from web.routes.pages import get_authorization_path, get_login_view
from app import app


def test_root_redirects_to_authorization(client):
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/oauth2/authorization/auth"


def test_root_ignores_query_and_headers(client):
    resp = client.get(
        "/",
        params={"next": "/dashboard", "foo": "bar"},
        headers={"Authorization": "Bearer abc", "Accept": "application/json"},
        follow_redirects=False,
    )
    assert resp.status_code == 302
    assert resp.headers["location"] == "/oauth2/authorization/auth"


def test_root_redirect_logs_once(client, caplog):
    caplog.set_level(logging.INFO, logger="oauth2_client")
    caplog.clear()
    client.get("/", follow_redirects=False)
    records = [r for r in caplog.records if r.name == "oauth2_client"]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert "/oauth2/authorization/auth" in records[0].getMessage()


def test_root_redirect_is_idempotent(client):
    first = client.get("/", follow_redirects=False)
    second = client.get("/", follow_redirects=False)
    assert first.status_code == second.status_code
    assert first.headers["location"] == second.headers["location"]
    assert first.content == second.content


def test_root_redirect_target_can_be_overridden(client):
    app.dependency_overrides[get_authorization_path] = lambda: "/oauth2/authorization/other"
    resp = client.get("/", follow_redirects=False)
    assert resp.headers["location"] == "/oauth2/authorization/other"


def test_index_renders_login_page(client):
    resp = client.get("/index")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.template.name == "index.html"
    assert 'href="/oauth2/authorization/auth"' in resp.text


def test_index_is_idempotent(client):
    assert client.get("/index").content == client.get("/index").content


def test_missing_view_is_server_error():
    app.dependency_overrides[get_login_view] = lambda: "missing"
    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            resp = client.get("/index")
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 500


def test_unknown_path_is_404(client):
    resp = client.get("/unknown", follow_redirects=False)
    assert resp.status_code == 404


def test_post_to_root_not_allowed(client):
    resp = client.post("/", follow_redirects=False)
    assert resp.status_code == 405


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["service"] == "oauth2-client"
