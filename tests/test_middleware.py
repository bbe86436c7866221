"""
test_middleware.py — Tests for the request/response middleware chain

Verifies the catch-all 404, the error boundary that converts unhandled
exceptions into a generic 500, CORS headers and the combined-format
access log.

Called by: pytest
Depends on: users_api.app.main (create_app), tests/conftest.py (client fixture)
"""

import logging

import pytest
from fastapi.testclient import TestClient

from users_api.app.main import create_app
from users_api.app.services.user_store import UserStore


class ExplodingStore(UserStore):
    """Store whose reads fail, to drive the error boundary."""

    def list_users(self):
        raise RuntimeError("store exploded: secret detail")


class TestRouteNotFound:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/unknown/route"),
            ("POST", "/api/wrong"),
            ("PUT", "/api/wrong/1"),
            ("DELETE", "/api/wrong/1"),
            ("PATCH", "/api/users/1"),
            ("POST", "/api/users/1"),
            ("DELETE", "/api/users"),
        ],
    )
    def test_unmatched_routes_are_404(self, client: TestClient, method, path):
        resp = client.request(method, path)
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "error": "Route not found"}


class TestErrorBoundary:
    def test_unhandled_exception_is_500(self, caplog):
        client = TestClient(create_app(store=ExplodingStore()))
        with caplog.at_level(logging.ERROR):
            resp = client.get("/api/users")
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Internal server error"}
        assert "secret detail" not in resp.text

    def test_unhandled_exception_is_logged_with_traceback(self, caplog):
        client = TestClient(create_app(store=ExplodingStore()))
        with caplog.at_level(logging.ERROR):
            client.get("/api/users")
        records = [r for r in caplog.records if r.name == "users_api.app.core.middleware"]
        assert records
        assert records[0].exc_info is not None
        assert "GET /api/users" in records[0].getMessage()

    def test_other_routes_keep_working(self):
        client = TestClient(create_app(store=ExplodingStore()))
        assert client.get("/api/users/1").status_code == 200


class TestCors:
    def test_simple_request_gets_allow_origin(self, client: TestClient):
        resp = client.get("/health", headers={"Origin": "http://example.com"})
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_error_responses_get_allow_origin(self, client: TestClient):
        resp = client.get("/unknown/route", headers={"Origin": "http://example.com"})
        assert resp.status_code == 404
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_500_gets_allow_origin(self):
        client = TestClient(create_app(store=ExplodingStore()))
        resp = client.get("/api/users", headers={"Origin": "http://example.com"})
        assert resp.status_code == 500
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_preflight_is_answered(self, client: TestClient):
        resp = client.options(
            "/api/users",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert resp.status_code == 200
        assert "POST" in resp.headers["access-control-allow-methods"]


class TestAccessLog:
    def test_one_line_per_request(self, client: TestClient, caplog):
        with caplog.at_level(logging.INFO, logger="users_api.access"):
            client.get("/api/users?verbose=1", headers={"User-Agent": "pytest-agent", "Referer": "http://ref"})
        lines = [r.getMessage() for r in caplog.records if r.name == "users_api.access"]
        assert len(lines) == 1
        line = lines[0]
        assert '"GET /api/users?verbose=1 HTTP/1.1" 200' in line
        assert line.endswith('"http://ref" "pytest-agent"')

    def test_missing_headers_render_as_dash(self, client: TestClient, caplog):
        with caplog.at_level(logging.INFO, logger="users_api.access"):
            client.get("/unknown", headers={"User-Agent": ""})
        line = [r.getMessage() for r in caplog.records if r.name == "users_api.access"][0]
        assert " 404 " in line
        assert '"-"' in line
