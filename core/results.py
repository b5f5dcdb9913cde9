"""
Tool outcomes.

Every tool invocation ends in exactly one of ToolSuccess or ToolFailure.
Both render to the MCP call-tool result shape.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from core.errors import ErrorCode, SheeterError


@dataclass(frozen=True)
class ToolSuccess:
    text: str

    @property
    def is_error(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"content": [{"type": "text", "text": self.text}]}


@dataclass(frozen=True)
class ToolFailure:
    text: str
    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    @property
    def is_error(self) -> bool:
        return True

    @classmethod
    def from_exception(cls, error: BaseException) -> "ToolFailure":
        """Build a failure whose text is the error's message."""
        if isinstance(error, SheeterError):
            return cls(text=f"Error: {error.message}", code=error.code)
        return cls(text=f"Error: {error}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": True,
        }


ToolOutcome = Union[ToolSuccess, ToolFailure]
