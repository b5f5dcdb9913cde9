"""
Sheeter Spreadsheet Tools

One handler per catalog tool. Each handler sends a single request through the
SheeterClient and formats the JSON response as readable text.
"""

import logging
from typing import Any, Awaitable, Callable, Dict

from core.api_client import SheeterClient, sheet_path
from core.errors import ApiReportedFailure
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
    WriteSheetRequest,
)

# Configure module logger
logger = logging.getLogger(__name__)

MAX_PREVIEW_ROWS = 10

ToolHandler = Callable[[SheeterClient, Any], Awaitable[str]]

HANDLERS: Dict[str, ToolHandler] = {}


def sheets_tool(name: str):
    """Register the decorated coroutine as the handler for a catalog tool."""

    def decorator(func: ToolHandler) -> ToolHandler:
        HANDLERS[name] = func
        return func

    return decorator


def _check_reported_success(tool_name: str, result: Any) -> None:
    """Raise when a 2xx response body explicitly says the operation failed."""
    if isinstance(result, dict) and result.get("success") is False:
        detail = result.get("message") or result.get("error")
        raise ApiReportedFailure(tool_name, str(detail) if detail else None)


def _format_rows(data: list) -> str:
    if not data:
        return "No data found"

    lines = []
    for idx, row in enumerate(data[:MAX_PREVIEW_ROWS]):
        cells = ", ".join(f"{key}: {value}" for key, value in row.items())
        lines.append(f"Row {idx + 1}: {cells}")

    text = "\n".join(lines)
    if len(data) > MAX_PREVIEW_ROWS:
        text += f"\n... and {len(data) - MAX_PREVIEW_ROWS} more rows"
    return text


@sheets_tool("create_spreadsheet")
async def create_spreadsheet(
    client: SheeterClient, request: CreateSpreadsheetRequest
) -> str:
    """
    Creates a new spreadsheet.

    Returns:
        str: Confirmation with the new spreadsheet's ID and URL.
    """
    logger.info(f"[create_spreadsheet] Invoked. Title: '{request.title}'")

    result = await client.request(
        "/api/sheets/create", method="POST", json_body={"title": request.title}
    )
    _check_reported_success("create_spreadsheet", result)

    text_output = (
        f'Successfully created spreadsheet: "{request.title}"\n'
        f"Spreadsheet ID: {result['spreadsheetId']}\n"
        f"URL: {result['spreadsheetUrl']}"
    )

    logger.info(f"Successfully created spreadsheet {result['spreadsheetId']}.")
    return text_output


@sheets_tool("read_sheet")
async def read_sheet(client: SheeterClient, request: ReadSheetRequest) -> str:
    """
    Reads a range and summarizes its rows.

    Only the first ten rows are listed; the remainder is reported as a count.

    Returns:
        str: Range, row count, headers and a preview of the rows.
    """
    logger.info(
        f"[read_sheet] Invoked. Spreadsheet: {request.sheet_id}, Range: {request.range_name}"
    )

    result = await client.request(
        sheet_path(request.sheet_id),
        params={
            "range": request.range_name,
            "majorDimension": request.major_dimension,
            "valueRenderOption": request.value_render_option,
        },
    )
    _check_reported_success("read_sheet", result)

    headers = result.get("headers") or []
    headers_text = ", ".join(str(header) for header in headers) or "No headers"
    data_text = _format_rows(result.get("data") or [])

    return (
        f"Sheet Data from {result.get('range')} ({result.get('rowCount')} rows):\n\n"
        f"Headers: {headers_text}\n\n"
        f"Data:\n{data_text}"
    )


@sheets_tool("write_sheet")
async def write_sheet(client: SheeterClient, request: WriteSheetRequest) -> str:
    """
    Writes a 2D array of values into a single range.

    Returns:
        str: Updated cell, row and column counts.
    """
    logger.info(
        f"[write_sheet] Invoked. Spreadsheet: {request.sheet_id}, Range: {request.range_name}, Rows: {len(request.values)}"
    )

    result = await client.request(
        sheet_path(request.sheet_id, "/values"),
        method="PUT",
        json_body={
            "range": request.range_name,
            "values": request.values,
            "valueInputOption": request.value_input_option,
        },
    )
    _check_reported_success("write_sheet", result)

    return (
        f"Successfully updated {result['updatedCells']} cells in range {result['updatedRange']}\n"
        f"Updated {result['updatedRows']} rows and {result['updatedColumns']} columns"
    )


@sheets_tool("append_to_sheet")
async def append_to_sheet(
    client: SheeterClient, request: AppendToSheetRequest
) -> str:
    """
    Appends rows after the last row of data.

    Returns:
        str: Appended cell count and the range the rows landed in.
    """
    logger.info(
        f"[append_to_sheet] Invoked. Spreadsheet: {request.sheet_id}, Rows: {len(request.values)}"
    )

    result = await client.request(
        sheet_path(request.sheet_id, "/append"),
        method="POST",
        json_body={
            "values": request.values,
            "valueInputOption": request.value_input_option,
        },
    )
    _check_reported_success("append_to_sheet", result)

    updates = result["updates"]
    return (
        f"Successfully appended {updates['updatedCells']} cells to the sheet\n"
        f"Data added to range: {updates['updatedRange']}"
    )


@sheets_tool("clear_range")
async def clear_range(client: SheeterClient, request: ClearRangeRequest) -> str:
    logger.info(
        f"[clear_range] Invoked. Spreadsheet: {request.sheet_id}, Range: {request.range_name}"
    )

    result = await client.request(
        sheet_path(request.sheet_id, "/values"),
        method="DELETE",
        params={"range": request.range_name},
    )
    _check_reported_success("clear_range", result)

    return f"Successfully cleared range {result['clearedRange']}"


@sheets_tool("batch_get_ranges")
async def batch_get_ranges(
    client: SheeterClient, request: BatchGetRangesRequest
) -> str:
    """
    Reads several ranges in one request.

    Returns:
        str: One line per returned range with its row count.
    """
    logger.info(
        f"[batch_get_ranges] Invoked. Spreadsheet: {request.sheet_id}, Ranges: {request.ranges}"
    )

    result = await client.request(
        sheet_path(request.sheet_id, "/batch-get"),
        method="POST",
        json_body={
            "ranges": request.ranges,
            "majorDimension": request.major_dimension,
            "valueRenderOption": request.value_render_option,
        },
    )
    _check_reported_success("batch_get_ranges", result)

    value_ranges = result.get("valueRanges") or []
    range_lines = [
        f"Range {idx + 1} ({value_range.get('range')}): {len(value_range.get('values') or [])} rows"
        for idx, value_range in enumerate(value_ranges)
    ]
    range_results = "\n".join(range_lines) or "No ranges returned"

    return f"Batch get completed for {len(request.ranges)} ranges:\n\n{range_results}"


@sheets_tool("batch_update_ranges")
async def batch_update_ranges(
    client: SheeterClient, request: BatchUpdateRangesRequest
) -> str:
    """
    Writes values into several ranges in one request.

    Returns:
        str: Total updated cells and the number of ranges sent.
    """
    logger.info(
        f"[batch_update_ranges] Invoked. Spreadsheet: {request.sheet_id}, Ranges: {len(request.data)}"
    )

    result = await client.request(
        sheet_path(request.sheet_id, "/batch-update"),
        method="PUT",
        json_body={
            "data": [item.model_dump(by_alias=True) for item in request.data],
            "valueInputOption": request.value_input_option,
        },
    )
    _check_reported_success("batch_update_ranges", result)

    return (
        "Batch update completed:\n"
        f"Total updated cells: {result['totalUpdatedCells']}\n"
        f"Total updated ranges: {len(request.data)}"
    )


@sheets_tool("get_sheet_metadata")
async def get_sheet_metadata(
    client: SheeterClient, request: GetSheetMetadataRequest
) -> str:
    """
    Gets spreadsheet properties and the list of sheet tabs.

    Returns:
        str: Title, ID, locale, time zone and one line per sheet with its size.
    """
    logger.info(f"[get_sheet_metadata] Invoked. Spreadsheet: {request.sheet_id}")

    result = await client.request(sheet_path(request.sheet_id, "/metadata"))
    _check_reported_success("get_sheet_metadata", result)

    properties = result["properties"]
    sheets_info = []
    for sheet in result.get("sheets") or []:
        grid = sheet["gridProperties"]
        sheets_info.append(
            f"• {sheet['title']} (ID: {sheet['sheetId']}, "
            f"{grid['rowCount']} rows × {grid['columnCount']} cols)"
        )

    return (
        f"Spreadsheet: {properties['title']}\n"
        f"Spreadsheet ID: {result['spreadsheetId']}\n"
        f"Locale: {properties['locale']}\n"
        f"Time Zone: {properties['timeZone']}\n\n"
        "Sheets:\n" + ("\n".join(sheets_info) or "No sheets found")
    )


@sheets_tool("delete_rows")
async def delete_rows(client: SheeterClient, request: DeleteRowsRequest) -> str:
    """
    Deletes the rows in [startIndex, endIndex) from a sheet tab.

    The API does not describe what it deleted, so the confirmation echoes the
    requested span once the call succeeds.

    Returns:
        str: The deleted index span and row count.
    """
    logger.info(
        f"[delete_rows] Invoked. Spreadsheet: {request.sheet_id}, Tab: {request.sheet_tab_id}, "
        f"Rows: {request.start_index}-{request.end_index}"
    )

    result = await client.request(
        sheet_path(request.sheet_id, "/rows"),
        method="DELETE",
        params={
            "startIndex": str(request.start_index),
            "endIndex": str(request.end_index),
            "sheetTabId": str(request.sheet_tab_id),
        },
    )
    _check_reported_success("delete_rows", result)

    row_count = request.end_index - request.start_index
    return (
        f"Successfully deleted rows from index {request.start_index} to "
        f"{request.end_index - 1} ({row_count} rows total)"
    )


@sheets_tool("batch_update_spreadsheet")
async def batch_update_spreadsheet(
    client: SheeterClient, request: BatchUpdateSpreadsheetRequest
) -> str:
    logger.info(
        f"[batch_update_spreadsheet] Invoked. Spreadsheet: {request.sheet_id}, Requests: {len(request.requests)}"
    )

    result = await client.request(
        sheet_path(request.sheet_id, "/batch-update-spreadsheet"),
        method="POST",
        json_body={"requests": request.requests},
    )
    _check_reported_success("batch_update_spreadsheet", result)

    return (
        "Batch spreadsheet operation completed successfully\n"
        f"Processed {len(request.requests)} requests\n"
        "Operation details available in spreadsheet"
    )
