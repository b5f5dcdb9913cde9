"""
Tests for the spreadsheet tool handlers.

Each handler is run against a canned API response; the tests check both the
request sent to the Sheeter API and the text produced from the response.
"""

import json

import pytest

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
from gsheets.sheets_tools import (
    append_to_sheet,
    batch_get_ranges,
    batch_update_ranges,
    batch_update_spreadsheet,
    clear_range,
    create_spreadsheet,
    delete_rows,
    get_sheet_metadata,
    read_sheet,
    write_sheet,
)

METADATA_FIXTURE = {
    "success": True,
    "spreadsheetId": "sheet-789",
    "properties": {"title": "Quarterly Report", "locale": "en_US", "timeZone": "Europe/Berlin"},
    "sheets": [
        {"sheetId": 0, "title": "Summary", "gridProperties": {"rowCount": 1000, "columnCount": 26}},
        {"sheetId": 417, "title": "Raw Data", "gridProperties": {"rowCount": 250, "columnCount": 8}},
    ],
}


def _body(request):
    return json.loads(request.content)


class TestCreateSpreadsheet:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api(
            {
                "success": True,
                "spreadsheetId": "new-sheet-123",
                "spreadsheetUrl": "https://docs.google.com/spreadsheets/d/new-sheet-123",
                "message": "Created",
            }
        )

        text = await create_spreadsheet(client, CreateSpreadsheetRequest(title="Budget 2025"))

        assert sent[0].method == "POST"
        assert sent[0].url.path == "/api/sheets/create"
        assert _body(sent[0]) == {"title": "Budget 2025"}
        assert text == (
            'Successfully created spreadsheet: "Budget 2025"\n'
            "Spreadsheet ID: new-sheet-123\n"
            "URL: https://docs.google.com/spreadsheets/d/new-sheet-123"
        )


class TestReadSheet:
    @pytest.mark.asyncio
    async def test_request_uses_defaults(self, sheeter_api):
        client, sent = sheeter_api({"data": [], "headers": [], "rowCount": 0, "range": "A:Z"})

        await read_sheet(client, ReadSheetRequest.model_validate({"sheetId": "abc"}))

        assert sent[0].method == "GET"
        assert sent[0].url.path == "/api/sheets/abc"
        params = sent[0].url.params
        assert params["range"] == "A:Z"
        assert params["majorDimension"] == "ROWS"
        assert params["valueRenderOption"] == "FORMATTED_VALUE"

    @pytest.mark.asyncio
    async def test_output_lists_rows(self, sheeter_api):
        client, _ = sheeter_api(
            {
                "success": True,
                "data": [
                    {"Name": "Alice", "Role": "Engineer"},
                    {"Name": "Bob", "Role": "Designer"},
                ],
                "headers": ["Name", "Role"],
                "rowCount": 2,
                "range": "Sheet1!A1:B3",
                "values": [["Name", "Role"], ["Alice", "Engineer"], ["Bob", "Designer"]],
            }
        )

        text = await read_sheet(client, ReadSheetRequest.model_validate({"sheetId": "abc"}))

        assert text == (
            "Sheet Data from Sheet1!A1:B3 (2 rows):\n\n"
            "Headers: Name, Role\n\n"
            "Data:\n"
            "Row 1: Name: Alice, Role: Engineer\n"
            "Row 2: Name: Bob, Role: Designer"
        )

    @pytest.mark.asyncio
    async def test_truncates_after_ten_rows(self, sheeter_api):
        data = [{"id": str(i)} for i in range(1, 12)]
        client, _ = sheeter_api({"data": data, "headers": ["id"], "rowCount": 11, "range": "A1:A12"})

        text = await read_sheet(client, ReadSheetRequest.model_validate({"sheetId": "abc"}))

        assert "Row 10: id: 10" in text
        assert "Row 11" not in text
        assert text.endswith("\n... and 1 more rows")

    @pytest.mark.asyncio
    async def test_exactly_ten_rows_has_no_suffix(self, sheeter_api):
        data = [{"id": str(i)} for i in range(10)]
        client, _ = sheeter_api({"data": data, "headers": ["id"], "rowCount": 10, "range": "A:A"})

        text = await read_sheet(client, ReadSheetRequest.model_validate({"sheetId": "abc"}))

        assert "more rows" not in text

    @pytest.mark.asyncio
    async def test_empty_sheet(self, sheeter_api):
        client, _ = sheeter_api({"rowCount": 0, "range": "Sheet1!A1:Z1000"})

        text = await read_sheet(client, ReadSheetRequest.model_validate({"sheetId": "abc"}))

        assert "Headers: No headers" in text
        assert text.endswith("Data:\nNo data found")


class TestWriteSheet:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api(
            {"updatedCells": 6, "updatedRange": "Sheet1!A1:C2", "updatedRows": 2, "updatedColumns": 3}
        )
        request = WriteSheetRequest.model_validate(
            {"sheetId": "abc", "range": "A1:C2", "values": [["a", "b", "c"], [1, 2, 3]]}
        )

        text = await write_sheet(client, request)

        assert sent[0].method == "PUT"
        assert sent[0].url.path == "/api/sheets/abc/values"
        assert _body(sent[0]) == {
            "range": "A1:C2",
            "values": [["a", "b", "c"], [1, 2, 3]],
            "valueInputOption": "USER_ENTERED",
        }
        assert text == (
            "Successfully updated 6 cells in range Sheet1!A1:C2\n"
            "Updated 2 rows and 3 columns"
        )


class TestAppendToSheet:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api(
            {"success": True, "updates": {"updatedCells": 4, "updatedRange": "Sheet1!A11:B12"}}
        )
        request = AppendToSheetRequest.model_validate(
            {"sheetId": "abc", "values": [["x", "y"], ["z", "w"]], "valueInputOption": "RAW"}
        )

        text = await append_to_sheet(client, request)

        assert sent[0].method == "POST"
        assert sent[0].url.path == "/api/sheets/abc/append"
        assert _body(sent[0]) == {"values": [["x", "y"], ["z", "w"]], "valueInputOption": "RAW"}
        assert "Successfully appended 4 cells to the sheet" in text
        assert "Data added to range: Sheet1!A11:B12" in text


class TestClearRange:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api({"clearedRange": "Sheet1!B2:D9"})

        text = await clear_range(
            client, ClearRangeRequest.model_validate({"sheetId": "abc", "range": "B2:D9"})
        )

        assert sent[0].method == "DELETE"
        assert sent[0].url.path == "/api/sheets/abc/values"
        assert sent[0].url.params["range"] == "B2:D9"
        assert text == "Successfully cleared range Sheet1!B2:D9"


class TestBatchGetRanges:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api(
            {
                "valueRanges": [
                    {"range": "Sheet1!A1:B3", "values": [["a"], ["b"], ["c"]]},
                    {"range": "Sheet2!C1:C2"},
                ]
            }
        )
        request = BatchGetRangesRequest.model_validate(
            {"sheetId": "abc", "ranges": ["Sheet1!A1:B3", "Sheet2!C1:C2"], "valueRenderOption": "FORMULA"}
        )

        text = await batch_get_ranges(client, request)

        assert sent[0].method == "POST"
        assert sent[0].url.path == "/api/sheets/abc/batch-get"
        assert _body(sent[0]) == {
            "ranges": ["Sheet1!A1:B3", "Sheet2!C1:C2"],
            "majorDimension": "ROWS",
            "valueRenderOption": "FORMULA",
        }
        assert text == (
            "Batch get completed for 2 ranges:\n\n"
            "Range 1 (Sheet1!A1:B3): 3 rows\n"
            "Range 2 (Sheet2!C1:C2): 0 rows"
        )

    @pytest.mark.asyncio
    async def test_no_ranges_returned(self, sheeter_api):
        client, _ = sheeter_api({"valueRanges": []})

        text = await batch_get_ranges(
            client, BatchGetRangesRequest.model_validate({"sheetId": "abc", "ranges": ["A1"]})
        )

        assert text == "Batch get completed for 1 ranges:\n\nNo ranges returned"


class TestBatchUpdateRanges:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api({"totalUpdatedCells": 5})
        request = BatchUpdateRangesRequest.model_validate(
            {
                "sheetId": "abc",
                "data": [
                    {"range": "A1:B1", "values": [["a", "b"]]},
                    {"range": "D1:D3", "values": [["1"], ["2"], ["3"]]},
                ],
            }
        )

        text = await batch_update_ranges(client, request)

        assert sent[0].method == "PUT"
        assert sent[0].url.path == "/api/sheets/abc/batch-update"
        assert _body(sent[0]) == {
            "data": [
                {"range": "A1:B1", "values": [["a", "b"]]},
                {"range": "D1:D3", "values": [["1"], ["2"], ["3"]]},
            ],
            "valueInputOption": "USER_ENTERED",
        }
        assert text == (
            "Batch update completed:\n"
            "Total updated cells: 5\n"
            "Total updated ranges: 2"
        )


class TestGetSheetMetadata:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api(METADATA_FIXTURE)

        text = await get_sheet_metadata(
            client, GetSheetMetadataRequest.model_validate({"sheetId": "sheet-789"})
        )

        assert sent[0].method == "GET"
        assert sent[0].url.path == "/api/sheets/sheet-789/metadata"
        assert text == (
            "Spreadsheet: Quarterly Report\n"
            "Spreadsheet ID: sheet-789\n"
            "Locale: en_US\n"
            "Time Zone: Europe/Berlin\n\n"
            "Sheets:\n"
            "• Summary (ID: 0, 1000 rows × 26 cols)\n"
            "• Raw Data (ID: 417, 250 rows × 8 cols)"
        )

    @pytest.mark.asyncio
    async def test_no_sheets(self, sheeter_api):
        fixture = dict(METADATA_FIXTURE, sheets=[])
        client, _ = sheeter_api(fixture)

        text = await get_sheet_metadata(
            client, GetSheetMetadataRequest.model_validate({"sheetId": "sheet-789"})
        )

        assert text.endswith("Sheets:\nNo sheets found")


class TestDeleteRows:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api({"success": True})
        request = DeleteRowsRequest.model_validate(
            {"sheetId": "abc", "startIndex": 2, "endIndex": 5}
        )

        text = await delete_rows(client, request)

        assert sent[0].method == "DELETE"
        assert sent[0].url.path == "/api/sheets/abc/rows"
        assert dict(sent[0].url.params) == {"startIndex": "2", "endIndex": "5", "sheetTabId": "0"}
        assert text == "Successfully deleted rows from index 2 to 4 (3 rows total)"

    @pytest.mark.asyncio
    async def test_reported_failure_is_raised(self, sheeter_api):
        client, _ = sheeter_api({"success": False, "message": "Sheet tab 9 does not exist"})
        request = DeleteRowsRequest.model_validate(
            {"sheetId": "abc", "startIndex": 0, "endIndex": 1, "sheetTabId": 9}
        )

        with pytest.raises(ApiReportedFailure, match="Sheet tab 9 does not exist"):
            await delete_rows(client, request)


class TestBatchUpdateSpreadsheet:
    @pytest.mark.asyncio
    async def test_request_and_output(self, sheeter_api):
        client, sent = sheeter_api({"replies": [{}, {}]})
        requests = [
            {"findReplace": {"find": "foo", "replacement": "bar", "allSheets": True}},
            {"addSheet": {"properties": {"title": "Archive"}}},
        ]

        text = await batch_update_spreadsheet(
            client,
            BatchUpdateSpreadsheetRequest.model_validate({"sheetId": "abc", "requests": requests}),
        )

        assert sent[0].method == "POST"
        assert sent[0].url.path == "/api/sheets/abc/batch-update-spreadsheet"
        assert _body(sent[0]) == {"requests": requests}
        assert text == (
            "Batch spreadsheet operation completed successfully\n"
            "Processed 2 requests\n"
            "Operation details available in spreadsheet"
        )
