"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import json
import re
from types import SimpleNamespace
from typing import Any
from unittest.mock import patch

import httpx
import pytest
import respx

from github_projects_mcp.github.client import GitHubClient

API_URL = "https://api.github.test"

_OPERATION = re.compile(r"\b(?:query|mutation)\s+(\w+)")


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if not config.getoption("-m", default=None) or "integration" not in config.getoption("-m", default=""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


class GraphQLStub:
    """respx side effect that answers GraphQL requests by operation name.

    Every request is recorded in ``calls`` as ``(operation, variables)``.
    """

    def __init__(self) -> None:
        self._responses: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.router: respx.MockRouter | None = None

    def on(
        self,
        operation: str,
        data: dict[str, Any] | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        body: dict[str, Any] = {"data": data}
        if errors:
            body["errors"] = errors
        self._responses[operation] = body

    @property
    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]

    def variables(self, operation: str) -> dict[str, Any]:
        for name, variables in self.calls:
            if name == operation:
                return variables
        raise AssertionError(f"{operation} was never called")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        operation = _OPERATION.search(payload["query"]).group(1)
        self.calls.append((operation, payload.get("variables", {})))
        if operation not in self._responses:
            return httpx.Response(500, text=f"unexpected operation {operation}")
        return httpx.Response(200, json=self._responses[operation])


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest.fixture
async def github_client():
    c = GitHubClient(token="test-token", base_url=API_URL)
    yield c
    await c.close()


@pytest.fixture
def github_api():
    """respx router for the test API host with a GraphQLStub behind /graphql."""
    stub = GraphQLStub()
    with respx.mock(base_url=API_URL, assert_all_called=False) as router:
        router.post("/graphql").mock(side_effect=stub)
        stub.router = router
        yield stub


@pytest.fixture(autouse=True)
def server_settings():
    """Settings seen by the read-only guard; writes are allowed unless a test flips it."""
    settings = SimpleNamespace(read_only_mode=False)
    with patch("github_projects_mcp.guards.get_settings", return_value=settings):
        yield settings


def not_found_error(kind: str, login: str) -> list[dict[str, Any]]:
    return [
        {
            "type": "NOT_FOUND",
            "path": [kind],
            "message": f"Could not resolve to a {kind.capitalize()} with the login of '{login}'.",
        }
    ]


@pytest.fixture
def graphql_not_found():
    return not_found_error
