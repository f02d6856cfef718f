"""
Workspace lookup for MCP tool calls.

Clients pass the workspace in the request metadata:
    session.call_tool("search", {...}, meta={"workspaceId": 42})
"""
from typing import Optional

from mcp.server.fastmcp import Context

from exasearch.config import get_settings
from exasearch.workspace import WorkspaceId

WORKSPACE_META_KEYS = ("workspaceId", "workspace_id")


def live_context(ctx: Optional[Context]) -> Optional[Context]:
    """The context if it belongs to an active request, else None."""
    if ctx is None:
        return None
    try:
        ctx.request_context
    except (ValueError, LookupError):
        return None
    return ctx


def workspace_id_from_context(ctx: Optional[Context]) -> Optional[WorkspaceId]:
    """Workspace id from request ``_meta``, else the configured fallback."""
    ctx = live_context(ctx)
    meta = ctx.request_context.meta if ctx is not None else None

    if meta is not None:
        for key in WORKSPACE_META_KEYS:
            value = getattr(meta, key, None)
            if value is None and hasattr(meta, "model_extra"):
                value = (meta.model_extra or {}).get(key)
            if value is not None and value != "":
                return value

    return get_settings().default_workspace_id
