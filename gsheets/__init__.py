"""
Sheeter Spreadsheet MCP Integration

This module provides the spreadsheet tools backed by the Sheeter API.
"""

from .catalog import TOOL_CATALOG, get_tool, list_tools
from .dispatcher import call_tool
from .sheets_tools import (
    create_spreadsheet,
    read_sheet,
    write_sheet,
    append_to_sheet,
    clear_range,
    batch_get_ranges,
    batch_update_ranges,
    get_sheet_metadata,
    delete_rows,
    batch_update_spreadsheet,
)

__all__ = [
    "TOOL_CATALOG",
    "get_tool",
    "list_tools",
    "call_tool",
    "create_spreadsheet",
    "read_sheet",
    "write_sheet",
    "append_to_sheet",
    "clear_range",
    "batch_get_ranges",
    "batch_update_ranges",
    "get_sheet_metadata",
    "delete_rows",
    "batch_update_spreadsheet",
]
