"""Async GitHub client using httpx: GraphQL for Projects V2, REST for issues."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from github_projects_mcp.github.errors import (
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubGraphQLError,
    GitHubNotFoundError,
    GitHubPermissionError,
    GitHubValidationError,
)

logger = logging.getLogger("github_projects_mcp")

_ERROR_MAP: dict[int, type[GitHubAPIError]] = {
    400: GitHubValidationError,
    401: GitHubAuthenticationError,
    403: GitHubPermissionError,
    404: GitHubNotFoundError,
    422: GitHubValidationError,
}

DEFAULT_API_URL = "https://api.github.com"


class GitHubClient:
    """Async wrapper around the GitHub GraphQL and REST APIs.

    A single ``httpx.AsyncClient`` carries the bearer token for both APIs.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: int = 30,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.status_code >= 400:
            body = response.text
            error_cls = _ERROR_MAP.get(response.status_code, GitHubAPIError)
            message = f"GitHub API {method} {path} failed ({response.status_code}): {body}"
            if error_cls is GitHubAPIError:
                raise GitHubAPIError(message, status_code=response.status_code)
            raise error_cls(message)
        if response.status_code == 204:
            return None
        return response.json()

    async def _post(self, path: str, json: Any) -> Any:
        return await self._request("POST", path, json=json)

    # ------------------------------------------------------------------
    # GraphQL
    # ------------------------------------------------------------------

    async def graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL document and return its ``data`` object.

        Raises:
            GitHubGraphQLError: If the response carries an ``errors`` array.
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables
        result = await self._post("/graphql", json=payload)

        errors = result.get("errors")
        if errors:
            message = "; ".join(e.get("message", "Unknown GraphQL error") for e in errors)
            raise GitHubGraphQLError(f"GraphQL request failed: {message}", errors=errors)
        return result.get("data") or {}

    # ------------------------------------------------------------------
    # REST: issues
    # ------------------------------------------------------------------

    async def create_issue(
        self, owner: str, repo: str, title: str, body: str | None = None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": title}
        if body is not None:
            payload["body"] = body
        return await self._post(f"/repos/{owner}/{repo}/issues", json=payload)
