"""Tool registry and dispatch.

Handlers register themselves with :func:`tool`; :func:`dispatch` validates the
raw argument object against the handler's input model and invokes it.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterator

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData
from pydantic import BaseModel, ValidationError

from github_projects_mcp.github.client import GitHubClient

logger = logging.getLogger("github_projects_mcp")

Handler = Callable[[GitHubClient, Any], Awaitable[str]]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_model: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)


class ToolRegistry:
    """Ordered mapping of tool name to ToolSpec."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._tools:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._tools[spec.name] = spec

    def get(self, name: str) -> ToolSpec | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


registry = ToolRegistry()


def tool(name: str, input_model: type[BaseModel], description: str) -> Callable[[Handler], Handler]:
    """Decorator that registers a handler under ``name`` in the global registry."""

    def decorator(fn: Handler) -> Handler:
        registry.register(ToolSpec(name, description, input_model, fn))
        return fn

    return decorator


def format_validation_error(error: ValidationError) -> str:
    """Render every violated field of a ValidationError on one line."""
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{location}: {err['msg']}")
    return "Invalid arguments: " + ", ".join(problems)


async def dispatch(
    client: GitHubClient,
    name: str,
    arguments: dict[str, Any] | None,
    tools: ToolRegistry | None = None,
) -> str:
    """Validate ``arguments`` and run the tool registered as ``name``.

    Raises:
        McpError: METHOD_NOT_FOUND for an unknown tool, INVALID_PARAMS when
            the arguments do not satisfy the tool's input model.
    """
    spec = (tools or registry).get(name)
    if spec is None:
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

    try:
        params = spec.input_model.model_validate(arguments or {})
    except ValidationError as e:
        message = format_validation_error(e)
        logger.info("Rejected %s call: %s", name, message)
        raise McpError(ErrorData(code=INVALID_PARAMS, message=message)) from e

    start = time.monotonic()
    try:
        return await spec.handler(client, params)
    except Exception as e:
        logger.exception("Tool %s raised", name)
        return f"Error running {name}: {e}"
    finally:
        logger.debug("Tool %s completed in %.3fs", name, time.monotonic() - start)
