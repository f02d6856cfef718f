"""
MCP protocol models - JSON-RPC 2.0 format.
"""
from typing import Any, Optional, Union
from pydantic import BaseModel, Field


# ============ BASE MODELS ============

class MCPRequest(BaseModel):
    """Base request - all MCP requests have these fields."""
    jsonrpc: str = Field(default="2.0")
    id: Union[int, str] = Field(...)
    method: str = Field(...)
    params: Optional[dict[str, Any]] = Field(default=None)


# ============ TOOLS/CALL ============

class WorkspaceRef(BaseModel):
    """Workspace the call is scoped to, as supplied by the host."""
    id: Union[int, str] = Field(...)


class ToolsCallParams(BaseModel):
    """Params of a tools/call request."""
    name: str = Field(...)
    arguments: dict[str, Any] = Field(default_factory=dict)
    workspace: Optional[WorkspaceRef] = Field(default=None)


# ============ RESPONSES ============

def result_response(request_id: Union[int, str], result: dict[str, Any]) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def error_response(request_id: Union[int, str], code: int, message: str) -> dict:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def text_result(text: str, is_error: bool = False) -> dict[str, Any]:
    """tools/call result carrying a single text block."""
    return {
        "content": [{"type": "text", "text": text}],
        "isError": is_error,
    }


# Error codes
ERROR_PARSE_ERROR = -32700
ERROR_INVALID_REQUEST = -32600
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INVALID_PARAMS = -32602
ERROR_INTERNAL_ERROR = -32603
