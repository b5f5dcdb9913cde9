"""
Sheeter Tool Errors

Error codes and exception classes raised while serving a tool invocation.
The dispatcher turns every one of them into a failure result, so these
never reach the MCP host as exceptions.
"""

from enum import Enum
from typing import List, Optional, Tuple


class ErrorCode(str, Enum):
    """Machine-readable codes attached to failed tool invocations."""

    API_ERROR = "API_ERROR"
    API_REPORTED_FAILURE = "API_REPORTED_FAILURE"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class SheeterError(Exception):
    """Base class for errors raised by the Sheeter tools."""

    code = ErrorCode.INTERNAL_ERROR

    @property
    def message(self) -> str:
        return str(self)


class ApiCallError(SheeterError):
    """The Sheeter API answered with a non-2xx status."""

    code = ErrorCode.API_ERROR

    def __init__(self, status: int, status_text: str, body: str):
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(f"API call failed: {status} {status_text} - {body}")


class ApiReportedFailure(SheeterError):
    """The Sheeter API answered 2xx but flagged the operation as unsuccessful."""

    code = ErrorCode.API_REPORTED_FAILURE

    def __init__(self, tool_name: str, detail: Optional[str] = None):
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(
            f"API reported failure for {tool_name}: {detail or 'no details returned'}"
        )


class ToolArgumentError(SheeterError):
    """Tool arguments did not match the tool's declared schema."""

    code = ErrorCode.INVALID_ARGUMENTS

    def __init__(self, tool_name: str, problems: List[Tuple[str, str]]):
        self.tool_name = tool_name
        self.problems = problems
        details = "; ".join(f"{field}: {reason}" for field, reason in problems)
        super().__init__(f"Invalid arguments for {tool_name}: {details}")


class UnknownToolError(SheeterError):
    code = ErrorCode.UNKNOWN_TOOL

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")
