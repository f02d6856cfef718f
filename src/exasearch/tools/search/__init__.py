"""
Search tools for the Exa Search Agent MCP server.
"""
from typing import Optional

from mcp.server.fastmcp import Context, FastMCP

from exasearch.tools.context import live_context, workspace_id_from_context

from .schemas import (
    DEFAULT_NUM_RESULTS,
    AdvancedSearchRequest,
    ContentRequest,
    NumResults,
    SearchRequest,
    SearchType,
    SimilarityRequest,
)


def register(mcp: FastMCP) -> None:
    """Register search tools with the MCP server."""
    from exasearch.agent import get_agent

    @mcp.tool(name="search")
    async def search(
        query: str,
        type: SearchType = "auto",
        numResults: NumResults = DEFAULT_NUM_RESULTS,
        includeText: bool = False,
        ctx: Context = None,
    ) -> str:
        """Perform a web search using Exa and return relevant results.

        Args:
            query: The search query
            type: The type of search to perform (auto, neural or keyword)
            numResults: Number of results to return (1-25)
            includeText: Whether to include full text of results
        """
        request = SearchRequest(
            query=query, type=type, numResults=numResults, includeText=includeText
        )
        return await get_agent().search(workspace_id_from_context(ctx), request, live_context(ctx))

    @mcp.tool(name="getContents")
    async def get_contents(
        urls: list[str],
        includeText: bool = True,
        includeSummary: bool = False,
        includeHighlights: bool = False,
        ctx: Context = None,
    ) -> str:
        """Get clean, parsed content from specific URLs.

        Args:
            urls: Array of URLs to get content from
            includeText: Whether to include full text
            includeSummary: Whether to include AI-generated summary
            includeHighlights: Whether to include relevant highlights
        """
        request = ContentRequest(
            urls=urls,
            includeText=includeText,
            includeSummary=includeSummary,
            includeHighlights=includeHighlights,
        )
        return await get_agent().get_contents(workspace_id_from_context(ctx), request, live_context(ctx))

    @mcp.tool(name="findSimilar")
    async def find_similar(
        url: str,
        numResults: NumResults = DEFAULT_NUM_RESULTS,
        includeText: bool = False,
        ctx: Context = None,
    ) -> str:
        """Find pages similar to a given URL.

        Args:
            url: The URL to find similar pages for
            numResults: Number of results to return (1-25)
            includeText: Whether to include full text of results
        """
        request = SimilarityRequest(url=url, numResults=numResults, includeText=includeText)
        return await get_agent().find_similar(workspace_id_from_context(ctx), request, live_context(ctx))

    @mcp.tool(name="advancedSearch")
    async def advanced_search(
        query: str,
        type: SearchType = "auto",
        numResults: NumResults = DEFAULT_NUM_RESULTS,
        includeText: bool = False,
        startDate: Optional[str] = None,
        endDate: Optional[str] = None,
        includeDomains: Optional[list[str]] = None,
        excludeDomains: Optional[list[str]] = None,
        category: Optional[str] = None,
        ctx: Context = None,
    ) -> str:
        """Perform an advanced web search with filtering options.

        Args:
            query: The search query
            type: The type of search to perform (auto, neural or keyword)
            numResults: Number of results to return (1-25)
            includeText: Whether to include full text of results
            startDate: Filter results published after this date (YYYY-MM-DD)
            endDate: Filter results published before this date (YYYY-MM-DD)
            includeDomains: Only include results from these domains
            excludeDomains: Exclude results from these domains
            category: Filter by category (e.g., "research paper", "news", "company")
        """
        request = AdvancedSearchRequest(
            query=query,
            type=type,
            numResults=numResults,
            includeText=includeText,
            startDate=startDate,
            endDate=endDate,
            includeDomains=includeDomains,
            excludeDomains=excludeDomains,
            category=category,
        )
        return await get_agent().advanced_search(workspace_id_from_context(ctx), request, live_context(ctx))
