"""
Request models for the Sheeter spreadsheet tools.

Each tool's incoming argument mapping is validated into one of these models
before anything is sent to the API. Field aliases are the camelCase names
used on the wire and in the published tool schemas.
"""

from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

MajorDimension = Literal["ROWS", "COLUMNS"]
ValueRenderOption = Literal["FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA"]
ValueInputOption = Literal["RAW", "USER_ENTERED"]

CellValue = Union[str, int, float, bool]
CellRows = List[List[CellValue]]


class ToolRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SheetRequest(ToolRequest):
    sheet_id: str = Field(
        alias="sheetId", min_length=1, description="Google Spreadsheet ID"
    )


class CreateSpreadsheetRequest(ToolRequest):
    title: str = Field(description="Title for the new spreadsheet")


class ReadSheetRequest(SheetRequest):
    range_name: str = Field(
        default="A:Z", alias="range", description="A1 notation range (e.g., A1:D10)"
    )
    major_dimension: MajorDimension = Field(default="ROWS", alias="majorDimension")
    value_render_option: ValueRenderOption = Field(
        default="FORMATTED_VALUE", alias="valueRenderOption"
    )


class WriteSheetRequest(SheetRequest):
    range_name: str = Field(alias="range", description="A1 notation range (e.g., A1:B2)")
    values: CellRows = Field(description="2D array of values to write")
    value_input_option: ValueInputOption = Field(
        default="USER_ENTERED", alias="valueInputOption"
    )


class AppendToSheetRequest(SheetRequest):
    values: CellRows = Field(description="2D array of values to append")
    value_input_option: ValueInputOption = Field(
        default="USER_ENTERED", alias="valueInputOption"
    )


class ClearRangeRequest(SheetRequest):
    range_name: str = Field(
        alias="range", description="A1 notation range to clear (e.g., A1:B10)"
    )


class BatchGetRangesRequest(SheetRequest):
    ranges: List[str] = Field(description="List of A1 notation ranges")
    major_dimension: MajorDimension = Field(default="ROWS", alias="majorDimension")
    value_render_option: ValueRenderOption = Field(
        default="FORMATTED_VALUE", alias="valueRenderOption"
    )


class RangeValues(ToolRequest):
    """A range and the values to write into it."""

    range_name: str = Field(alias="range")
    values: CellRows


class BatchUpdateRangesRequest(SheetRequest):
    data: List[RangeValues] = Field(
        description="List of ranges and their values to update"
    )
    value_input_option: ValueInputOption = Field(
        default="USER_ENTERED", alias="valueInputOption"
    )


class GetSheetMetadataRequest(SheetRequest):
    pass


class DeleteRowsRequest(SheetRequest):
    start_index: int = Field(
        alias="startIndex", ge=0, description="Start index of rows to delete (0-based)"
    )
    end_index: int = Field(
        alias="endIndex",
        ge=0,
        description="End index of rows to delete (exclusive, 0-based)",
    )
    sheet_tab_id: int = Field(
        default=0,
        alias="sheetTabId",
        description="ID of the sheet tab (0 for first sheet)",
    )

    @model_validator(mode="after")
    def check_index_order(self):
        if self.end_index <= self.start_index:
            raise ValueError("endIndex must be greater than startIndex")
        return self


class BatchUpdateSpreadsheetRequest(SheetRequest):
    requests: List[Dict[str, Any]] = Field(
        description="Array of batch update requests (find/replace, formatting, etc.)"
    )
