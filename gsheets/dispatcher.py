"""
Sheeter Tool Dispatcher

Routes a tool invocation to its handler and guarantees a well-formed outcome:
every error raised while validating arguments, calling the API or formatting
the response comes back as a ToolFailure instead of propagating.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from core.api_client import SheeterClient
from core.errors import (
    ApiCallError,
    SheeterError,
    ToolArgumentError,
    UnknownToolError,
)
from core.results import ToolFailure, ToolOutcome, ToolSuccess
from gsheets.catalog import get_tool
from gsheets.sheets_tools import HANDLERS

logger = logging.getLogger(__name__)


def _argument_problems(error: ValidationError):
    problems = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "arguments"
        problems.append((field, detail["msg"]))
    return problems


async def _dispatch(
    client: SheeterClient, name: str, arguments: Mapping[str, Any]
) -> str:
    tool = get_tool(name)
    handler = HANDLERS.get(name)
    if tool is None or handler is None:
        raise UnknownToolError(name)

    try:
        request = tool.request_model.model_validate(dict(arguments))
    except ValidationError as e:
        raise ToolArgumentError(name, _argument_problems(e)) from e

    return await handler(client, request)


async def call_tool(
    client: SheeterClient, name: str, arguments: Optional[Mapping[str, Any]] = None
) -> ToolOutcome:
    """
    Execute a catalog tool and return its outcome.

    Args:
        client: API client used for the single outbound request
        name: Catalog tool name
        arguments: Raw argument mapping from the host; None is treated as empty

    Returns:
        ToolSuccess with the formatted text, or ToolFailure whose text is
        "Error: <message>".
    """
    try:
        text = await _dispatch(client, name, arguments or {})
    except ApiCallError as e:
        logger.error(f"API error in {name}: status {e.status}: {e.body}")
        return ToolFailure.from_exception(e)
    except SheeterError as e:
        logger.warning(f"Tool {name} rejected: {e}")
        return ToolFailure.from_exception(e)
    except Exception as e:
        logger.exception(f"An unexpected error occurred in {name}: {e}")
        return ToolFailure.from_exception(e)

    return ToolSuccess(text)
