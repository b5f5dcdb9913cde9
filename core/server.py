import logging
from importlib import metadata
from typing import Any, Dict, List

from mcp.types import TextContent
from starlette.requests import Request
from starlette.responses import JSONResponse

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult

from core.api_client import SheeterClient
from core.config import (
    get_transport_mode,
    set_transport_mode as _set_transport_mode,
)
from gsheets.catalog import TOOL_CATALOG
from gsheets.dispatcher import call_tool

logger = logging.getLogger(__name__)

SERVICE_NAME = "sheeter-mcp"

server = FastMCP(name="Sheeter API")


class SheeterTool(Tool):
    """MCP tool whose execution is delegated to the Sheeter dispatcher."""

    client: Any = None

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        outcome = await call_tool(self.client, self.name, arguments)
        if outcome.is_error:
            raise ToolError(outcome.text)
        return ToolResult(content=[TextContent(type="text", text=outcome.text)])


def set_transport_mode(mode: str):
    """Sets the transport mode for the server."""
    _set_transport_mode(mode)
    logger.info(f"Transport: {mode}")


def register_sheet_tools(client: SheeterClient) -> List[str]:
    """
    Registers every catalog tool on the MCP server, bound to the given client.

    Returns:
        The names of the registered tools, in catalog order.
    """
    names = []
    for definition in TOOL_CATALOG:
        server.add_tool(
            SheeterTool(
                name=definition.name,
                description=definition.description,
                parameters=definition.input_schema,
                client=client,
            )
        )
        names.append(definition.name)

    logger.info(f"Registered {len(names)} Sheeter tools: {', '.join(names)}")
    return names


@server.custom_route("/health", methods=["GET"])
async def health_check(request: Request):
    try:
        version = metadata.version(SERVICE_NAME)
    except metadata.PackageNotFoundError:
        version = "dev"
    return JSONResponse(
        {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": version,
            "transport": get_transport_mode(),
        }
    )
