#!/usr/bin/env python3
"""Validate GitHub Projects MCP configuration and test connectivity."""

import asyncio
import sys

from github_projects_mcp.github import queries
from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.settings import GitHubSettings


async def main() -> int:
    print("Loading settings...")
    try:
        settings = GitHubSettings()
    except Exception as e:
        print(f"FAIL: Could not load settings: {e}")
        print("Ensure GITHUB_TOKEN is set (environment, .env or .env.local).")
        return 1

    token = settings.token.get_secret_value()
    print(f"  GITHUB_API_URL: {settings.api_url}")
    print(f"  GITHUB_TOKEN: {'*' * 8}...{token[-4:]}")
    print(f"  GITHUB_READ_ONLY_MODE: {settings.read_only_mode}")

    print("\nTesting connectivity...")
    client = GitHubClient(token=token, base_url=settings.api_url, timeout=settings.timeout)

    try:
        data = await client.graphql(queries.GET_VIEWER)
        login = (data.get("viewer") or {}).get("login")
        print(f"  OK: Authenticated as {login}")

        data = await client.graphql(queries.GET_USER_PROJECTS, {"login": login})
        projects = ((data.get("user") or {}).get("projectsV2") or {}).get("nodes") or []
        print(f"  OK: Found {len(projects)} projects")
        for p in projects[:5]:
            print(f"    - #{p.get('number')}: {p.get('title')}")
        return 0
    except Exception as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
