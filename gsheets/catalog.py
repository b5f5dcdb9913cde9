"""
Sheeter Tool Catalog

Static declaration of every tool the server exposes. Input schemas are
derived from the request models in gsheets.models, so the published schema
and the validation applied at dispatch time cannot drift apart.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from gsheets.models import (
    AppendToSheetRequest,
    BatchGetRangesRequest,
    BatchUpdateRangesRequest,
    BatchUpdateSpreadsheetRequest,
    ClearRangeRequest,
    CreateSpreadsheetRequest,
    DeleteRowsRequest,
    GetSheetMetadataRequest,
    ReadSheetRequest,
    ToolRequest,
    WriteSheetRequest,
)


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    request_model: Type[ToolRequest]

    @property
    def input_schema(self) -> Dict[str, Any]:
        schema = self.request_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.pop("description", None)
        schema.setdefault("required", [])
        return schema

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


TOOL_CATALOG = (
    ToolDefinition(
        name="create_spreadsheet",
        description="Create a new Google Spreadsheet",
        request_model=CreateSpreadsheetRequest,
    ),
    ToolDefinition(
        name="read_sheet",
        description="Read data from a Google Sheet",
        request_model=ReadSheetRequest,
    ),
    ToolDefinition(
        name="write_sheet",
        description="Update values in a single range of a Google Sheet",
        request_model=WriteSheetRequest,
    ),
    ToolDefinition(
        name="append_to_sheet",
        description="Append values to the end of a Google Sheet",
        request_model=AppendToSheetRequest,
    ),
    ToolDefinition(
        name="clear_range",
        description="Clear values from a specific range in a Google Sheet",
        request_model=ClearRangeRequest,
    ),
    ToolDefinition(
        name="batch_get_ranges",
        description="Read values from multiple ranges in a Google Sheet",
        request_model=BatchGetRangesRequest,
    ),
    ToolDefinition(
        name="batch_update_ranges",
        description="Update values in multiple ranges of a Google Sheet",
        request_model=BatchUpdateRangesRequest,
    ),
    ToolDefinition(
        name="get_sheet_metadata",
        description="Get information about a Google Spreadsheet including sheets and properties",
        request_model=GetSheetMetadataRequest,
    ),
    ToolDefinition(
        name="delete_rows",
        description="Delete specific rows from a Google Sheet",
        request_model=DeleteRowsRequest,
    ),
    ToolDefinition(
        name="batch_update_spreadsheet",
        description="Perform complex operations like find/replace, formatting, adding sheets, etc.",
        request_model=BatchUpdateSpreadsheetRequest,
    ),
)

_TOOLS_BY_NAME = {tool.name: tool for tool in TOOL_CATALOG}


def list_tools() -> List[Dict[str, Any]]:
    """Return the catalog as MCP tool listings ({name, description, inputSchema})."""
    return [tool.to_dict() for tool in TOOL_CATALOG]


def get_tool(name: str) -> Optional[ToolDefinition]:
    return _TOOLS_BY_NAME.get(name)
