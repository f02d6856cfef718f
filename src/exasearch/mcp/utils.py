"""
MCP utilities - handler functions for processing requests.
"""
import logging

from pydantic import ValidationError

from .models import (
    ERROR_INTERNAL_ERROR,
    ERROR_INVALID_PARAMS,
    MCPRequest,
    ToolsCallParams,
    error_response,
    result_response,
    text_result,
)
from ..tools.base import get_all_tools, get_tool

logger = logging.getLogger(__name__)


def handle_tools_list(request: MCPRequest) -> dict:
    """
    Handle tools/list request.
    Returns all registered tools in MCP format.
    """
    try:
        tools_json = [tool.to_schema().model_dump() for tool in get_all_tools()]
    except Exception as e:
        logger.exception("tools/list failed")
        return error_response(request.id, ERROR_INTERNAL_ERROR, str(e))
    return result_response(request.id, {"tools": tools_json})


def _validation_message(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        parts.append(f"{location}: {item.get('msg')}" if location else str(item.get("msg")))
    return "; ".join(parts)


async def handle_tools_call(request: MCPRequest) -> dict:
    """
    Handle tools/call request.
    Validates the arguments against the tool's model and runs its handler.
    """
    try:
        params = ToolsCallParams.model_validate(request.params or {})
    except ValidationError as e:
        return error_response(request.id, ERROR_INVALID_PARAMS, _validation_message(e))

    tool = get_tool(params.name)
    if tool is None:
        return result_response(request.id, text_result(f"Tool '{params.name}' not found", True))

    workspace_id = params.workspace.id if params.workspace else None

    try:
        args = tool.parse_arguments(params.arguments)
    except ValidationError as e:
        message = f"Invalid arguments for '{params.name}': {_validation_message(e)}"
        return result_response(request.id, text_result(message, True))

    try:
        text = await tool.function(args, workspace_id)
    except Exception as e:
        logger.exception("Tool %s failed", params.name)
        return result_response(request.id, text_result(f"Error executing tool: {e}", True))

    return result_response(request.id, text_result(text))
