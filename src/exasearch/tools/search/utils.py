"""
Search dispatch against the Exa API.
"""
import asyncio
import logging
from typing import Any, Callable, Optional

from exa_py import AsyncExa
from mcp.server.fastmcp import Context

from exasearch.credentials import CredentialResolver
from exasearch.workspace import WorkspaceId

from .formatting import format_search_results
from .schemas import (
    AdvancedSearchRequest,
    ContentRequest,
    ResultRecord,
    SearchRequest,
    SimilarityRequest,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Any]


def to_records(response: Any) -> list[ResultRecord]:
    """Read ``response.results`` into ResultRecords, tolerating missing fields."""
    results = getattr(response, "results", None)
    if results is None and isinstance(response, dict):
        results = response.get("results")
    return [ResultRecord.from_provider(item) for item in results or []]


async def _report(ctx: Optional[Context], progress: float, message: str) -> None:
    if ctx:
        await ctx.report_progress(progress=progress, total=1.0, message=message)


class SearchDispatcher:
    """Issues Exa calls for a workspace and formats what comes back.

    Provider errors propagate; the capability layer turns them into text.
    """

    def __init__(
        self,
        resolver: CredentialResolver,
        client_factory: ClientFactory = AsyncExa,
        use_autoprompt: bool = False,
    ):
        self.resolver = resolver
        self.client_factory = client_factory
        self.use_autoprompt = use_autoprompt

    async def client_for(self, workspace_id: WorkspaceId) -> Any:
        """Get an Exa client with the workspace's API key."""
        api_key = await asyncio.to_thread(self.resolver.resolve_api_key, workspace_id)
        return self.client_factory(api_key)

    async def _with_text(self, client: Any, records: list[ResultRecord]) -> list[ResultRecord]:
        # Second pass: full page text for every result, in result order
        contents = await client.get_contents([record.url for record in records], text=True)
        return to_records(contents)

    async def search(
        self,
        workspace_id: WorkspaceId,
        request: SearchRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        client = await self.client_for(workspace_id)
        params = request.to_provider_params(self.use_autoprompt)
        logger.info("Exa search: %r %s", request.query, params)

        await _report(ctx, 0.3, "Calling search API...")
        response = await client.search(request.query, **params)
        records = to_records(response)

        if request.include_text and records:
            await _report(ctx, 0.6, f"Got {len(records)} results, fetching contents...")
            records = await self._with_text(client, records)

        await _report(ctx, 0.9, f"Formatting {len(records)} results...")
        return format_search_results(records, request.include_text)

    async def advanced_search(
        self,
        workspace_id: WorkspaceId,
        request: AdvancedSearchRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        # Filters are carried by the request's provider params
        return await self.search(workspace_id, request, ctx)

    async def get_contents(
        self,
        workspace_id: WorkspaceId,
        request: ContentRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        client = await self.client_for(workspace_id)
        params = request.to_provider_params()
        logger.info("Exa contents: %d urls %s", len(request.urls), params)

        await _report(ctx, 0.3, "Fetching contents...")
        response = await client.get_contents(list(request.urls), **params)
        return format_search_results(to_records(response), request.include_text)

    async def find_similar(
        self,
        workspace_id: WorkspaceId,
        request: SimilarityRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        client = await self.client_for(workspace_id)
        params = request.to_provider_params()
        logger.info("Exa find similar: %s %s", request.url, params)

        await _report(ctx, 0.3, "Finding similar pages...")
        response = await client.find_similar(request.url, **params)
        records = to_records(response)

        if request.include_text and records:
            await _report(ctx, 0.6, f"Got {len(records)} results, fetching contents...")
            records = await self._with_text(client, records)

        return format_search_results(records, request.include_text)
