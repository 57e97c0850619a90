"""Shared fixtures: a recording fake of the Miro REST API and a server wired to it."""

import json
import logging

import httpx
import pytest

from miro_mcp.client import MiroClient
from miro_mcp.config import MiroConfig
from miro_mcp.server import create_server

TEST_TOKEN = "test-token-1234567890"


class FakeMiroAPI:
    """Answers requests from a route table and records every request it sees.

    Routes are keyed by method and the path below ``/v2``. A route value is
    either an ``httpx.Response`` or a callable taking the request.
    Unrouted requests get ``200 {}``.
    """

    def __init__(self):
        self.requests = []
        self.routes = {}

    def add(self, method, path, json_body=None, status=200, text=None):
        if text is not None:
            response = httpx.Response(status, text=text)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body)
        else:
            response = httpx.Response(status)
        self.routes[(method, path)] = response
        return response

    def on(self, method, path, handler):
        self.routes[(method, path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/v2"):
            path = path[len("/v2"):]
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(200, json={})
        if callable(route):
            return route(request)
        return route

    def calls(self, method=None):
        return [
            (r.method, r.url.path[len("/v2"):])
            for r in self.requests
            if method is None or r.method == method
        ]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content) if request.content else None


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo configure_logging so caplog keeps seeing package records."""
    logger = logging.getLogger("miro_mcp")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def config():
    return MiroConfig(token=TEST_TOKEN)


@pytest.fixture
def api():
    return FakeMiroAPI()


@pytest.fixture
def client(config, api):
    return MiroClient(config, transport=httpx.MockTransport(api.handler))


@pytest.fixture
def mcp(config, client):
    return create_server(config, client=client)
