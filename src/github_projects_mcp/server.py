"""FastMCP server instance exposing every registered tool."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import (
    CallToolRequest,
    CallToolResult,
    ServerResult,
    TextContent,
    ToolAnnotations,
)

import github_projects_mcp.tools  # noqa: F401
from github_projects_mcp.dispatcher import ToolSpec, dispatch, registry
from github_projects_mcp.guards import READ_TOOLS
from github_projects_mcp.lifespan import get_github_client, lifespan


class DispatchedTool(Tool):
    """MCP tool whose arguments are validated and handled by the dispatcher.

    The JSON schema advertised to the host comes from the tool's pydantic
    input model, so names and enums match what ``dispatch`` accepts.
    """

    @classmethod
    def from_spec(cls, spec: ToolSpec) -> DispatchedTool:
        return cls(
            name=spec.name,
            description=spec.description,
            parameters=spec.input_schema(),
            annotations=ToolAnnotations(readOnlyHint=spec.name in READ_TOOLS),
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        text = await dispatch(get_github_client(), self.name, arguments)
        return ToolResult(content=[TextContent(type="text", text=text)])


mcp = FastMCP("github-projects-mcp", lifespan=lifespan)

for _spec in registry:
    mcp.add_tool(DispatchedTool.from_spec(_spec))


async def call_tool(request: CallToolRequest) -> ServerResult:
    """``tools/call`` handler installed on the low-level server.

    McpError raised by ``dispatch`` (INVALID_PARAMS, METHOD_NOT_FOUND) reaches
    the session unchanged and is sent as a JSON-RPC error response. Anything
    else comes back as a single text block.
    """
    params = request.params
    text = await dispatch(get_github_client(), params.name, params.arguments)
    return ServerResult(CallToolResult(content=[TextContent(type="text", text=text)]))


mcp._mcp_server.request_handlers[CallToolRequest] = call_tool
