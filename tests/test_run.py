"""
test_run.py — Tests for the uvicorn entry point

The startup announcement must only appear once uvicorn reports that it
is serving; a failed startup stays silent.

Called by: pytest
Depends on: run.py (ApiServer)
"""

import asyncio
import logging

from uvicorn import Config, Server

from run import ApiServer
from users_api.app.main import app


def _server(port: int = 4321) -> ApiServer:
    return ApiServer(Config(app=app, port=port))


def test_announces_urls_after_successful_startup(monkeypatch, caplog):
    async def fake_startup(self, sockets=None):
        self.started = True

    monkeypatch.setattr(Server, "startup", fake_startup)
    with caplog.at_level(logging.INFO, logger="users_api"):
        asyncio.run(_server().startup())
    messages = [r.getMessage() for r in caplog.records if r.name == "users_api"]
    assert messages == [
        "Server running on port 4321",
        "Health check: http://localhost:4321/health",
        "API endpoints: http://localhost:4321/api/users",
    ]


def test_silent_when_startup_fails(monkeypatch, caplog):
    async def failed_startup(self, sockets=None):
        self.should_exit = True

    monkeypatch.setattr(Server, "startup", failed_startup)
    with caplog.at_level(logging.INFO, logger="users_api"):
        asyncio.run(_server().startup())
    assert not [r for r in caplog.records if r.name == "users_api"]
