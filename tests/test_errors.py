"""
Tests for the error middleware: route misses, request parsing failures
and data store failures all come back as a flat {"msg": ...} body.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from nc_news.api import deps


class _UnreachableStore:
    """Stands in for a Session whose database has gone away."""

    def query(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("could not connect to server"))

    def close(self):
        pass


class _BrokenSession:
    def query(self, *args, **kwargs):
        raise RuntimeError("programming error with secret detail")


@pytest.mark.parametrize("method", ["GET", "POST", "PATCH", "PUT", "DELETE"])
def test_unknown_path_is_invalid_endpoint_for_every_method(client, method):
    resp = client.request(method, "/api/iDontExist")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Invalid endpoint."}


@pytest.mark.parametrize("method, path", [
    ("DELETE", "/api/topics"),
    ("POST", "/api/articles/1"),
    ("PUT", "/api/users"),
])
def test_unregistered_method_on_known_path_is_invalid_endpoint(client, method, path):
    resp = client.request(method, path)
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Invalid endpoint."}


@pytest.mark.parametrize("path", ["/", "/api", "/api/topics/", "/docs", "/openapi.json"])
def test_paths_outside_the_api_are_invalid_endpoints(client, path):
    resp = client.get(path)
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Invalid endpoint."}


def test_malformed_json_body_is_bad_request(client):
    resp = client.patch(
        "/api/articles/1",
        content=b'{"inc_votes": ',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}


def test_non_json_body_is_bad_request(client):
    resp = client.patch(
        "/api/articles/1",
        content=b"inc_votes=1",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}


def test_unreachable_store_is_internal_error(app):
    app.dependency_overrides[deps.get_db] = lambda: _UnreachableStore()
    with TestClient(app) as client:
        for path in ("/api/topics", "/api/users", "/api/articles/1"):
            resp = client.get(path)
            assert resp.status_code == 500
            assert resp.json() == {"msg": "Internal server error"}


def test_unexpected_exception_is_internal_error_without_details(app):
    app.dependency_overrides[deps.get_db] = lambda: _BrokenSession()
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/api/topics")
    assert resp.status_code == 500
    assert resp.json() == {"msg": "Internal server error"}
    assert "secret detail" not in resp.text
    assert resp.headers["X-Request-ID"]


def test_validation_runs_before_data_access(app):
    app.dependency_overrides[deps.get_db] = lambda: _UnreachableStore()
    with TestClient(app) as client:
        assert client.get("/api/articles/imNotAnID").status_code == 400
        assert client.patch("/api/articles/1", json={}).status_code == 400
