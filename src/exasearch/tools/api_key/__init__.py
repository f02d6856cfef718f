"""
Exa API key management tools for the MCP server.
"""
from mcp.server.fastmcp import Context, FastMCP

from exasearch.tools.context import workspace_id_from_context


def register(mcp: FastMCP) -> None:
    """Register API key tools with the MCP server."""
    from exasearch.agent import get_agent

    @mcp.tool(name="setExaApiKey")
    async def set_exa_api_key(apiKey: str, ctx: Context = None) -> str:
        """Set your personal Exa API key for search operations.

        Args:
            apiKey: Your Exa API key from dashboard.exa.ai
        """
        return await get_agent().set_api_key(workspace_id_from_context(ctx), apiKey)

    @mcp.tool(name="checkExaApiKey")
    async def check_exa_api_key(ctx: Context = None) -> str:
        """Check if an Exa API key is configured for this workspace."""
        return await get_agent().check_api_key(workspace_id_from_context(ctx))
