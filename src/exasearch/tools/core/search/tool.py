"""
Exa search tools for the JSON-RPC registry.
"""
from exasearch.agent import get_agent
from exasearch.tools.base import tool
from exasearch.tools.search.schemas import (
    AdvancedSearchRequest,
    ContentRequest,
    SearchRequest,
    SimilarityRequest,
)


@tool(
    name="search",
    description="Perform a web search using Exa and return relevant results",
    arguments=SearchRequest,
)
async def search(args: SearchRequest, workspace_id) -> str:
    return await get_agent().search(workspace_id, args)


@tool(
    name="getContents",
    description="Get clean, parsed content from specific URLs",
    arguments=ContentRequest,
)
async def get_contents(args: ContentRequest, workspace_id) -> str:
    return await get_agent().get_contents(workspace_id, args)


@tool(
    name="findSimilar",
    description="Find pages similar to a given URL",
    arguments=SimilarityRequest,
)
async def find_similar(args: SimilarityRequest, workspace_id) -> str:
    return await get_agent().find_similar(workspace_id, args)


@tool(
    name="advancedSearch",
    description="Perform an advanced web search with filtering options",
    arguments=AdvancedSearchRequest,
)
async def advanced_search(args: AdvancedSearchRequest, workspace_id) -> str:
    return await get_agent().advanced_search(workspace_id, args)
