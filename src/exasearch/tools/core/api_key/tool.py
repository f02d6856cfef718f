"""
Exa API key tools for the JSON-RPC registry.
"""
from exasearch.agent import get_agent
from exasearch.tools.base import tool
from exasearch.tools.api_key.schemas import CheckApiKeyRequest, SetApiKeyRequest


@tool(
    name="setExaApiKey",
    description="Set your personal Exa API key for search operations",
    arguments=SetApiKeyRequest,
)
async def set_exa_api_key(args: SetApiKeyRequest, workspace_id) -> str:
    return await get_agent().set_api_key(workspace_id, args.api_key)


@tool(
    name="checkExaApiKey",
    description="Check if an Exa API key is configured for this workspace",
    arguments=CheckApiKeyRequest,
)
async def check_exa_api_key(args: CheckApiKeyRequest, workspace_id) -> str:
    return await get_agent().check_api_key(workspace_id)
