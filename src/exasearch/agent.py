"""
Exa Search Agent capabilities.

Each capability checks for a workspace, does its work and always answers with
text: failures are returned as messages, never raised.
"""
import asyncio
import logging
from typing import Optional

from mcp.server.fastmcp import Context

from .config import get_settings
from .credentials import CredentialResolver, CredentialStatus
from .tools.search.schemas import (
    AdvancedSearchRequest,
    ContentRequest,
    SearchRequest,
    SimilarityRequest,
)
from .tools.search.utils import ClientFactory, SearchDispatcher
from .workspace import WorkspaceId, WorkspaceStore, build_workspace_store

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an advanced Exa search agent capable of performing web searches and retrieving content.
Exa is a powerful search engine that uses neural search to understand the meaning behind queries.
You can search for information, get contents of webpages, and find similar pages based on URLs."""

NO_WORKSPACE = "Error: No workspace context provided."
NO_WORKSPACE_RETRY = "Error: No workspace context provided. Please try again."

API_KEY_SAVED = (
    "Your Exa API key has been securely saved for this workspace. "
    "You can now use the search capabilities. Your API key is only stored in "
    "your workspace and not accessible to other users."
)

_KEY_EXAMPLE = (
    "(if user gives you for example '12345678-1234-5678-1234-123456789012' you should "
    "write to the file EXA_API_KEY='12345678-1234-5678-1234-123456789012')"
)
_KEY_SIGNUP = "You can get a free API key from https://dashboard.exa.ai/api-keys."

STATUS_MESSAGES = {
    CredentialStatus.NOT_CONFIGURED: (
        "No Exa API key is configured for this workspace. Please use the "
        f"'setExaApiKey' capability to set your API key {_KEY_EXAMPLE}. {_KEY_SIGNUP}"
    ),
    CredentialStatus.DEFAULT: (
        "Using the default Exa API key. For personal usage, please set your own "
        f"API key using the 'setExaApiKey' capability {_KEY_EXAMPLE}. {_KEY_SIGNUP}"
    ),
    CredentialStatus.WORKSPACE: (
        "An Exa API key is configured for this workspace. "
        "You're ready to use the search capabilities."
    ),
}


def _has_workspace(workspace_id: Optional[WorkspaceId]) -> bool:
    return workspace_id is not None and workspace_id != ""


def _error(prefix: str, exc: BaseException) -> str:
    return f"{prefix}: {exc}"


class ExaSearchAgent:
    """The six Exa capabilities, scoped per workspace."""

    def __init__(self, resolver: CredentialResolver, dispatcher: SearchDispatcher):
        self.resolver = resolver
        self.dispatcher = dispatcher

    @classmethod
    def create(
        cls,
        store: WorkspaceStore,
        default_api_key: str = "",
        client_factory: Optional[ClientFactory] = None,
        use_autoprompt: bool = False,
    ) -> "ExaSearchAgent":
        resolver = CredentialResolver(store, default_api_key)
        if client_factory is None:
            dispatcher = SearchDispatcher(resolver, use_autoprompt=use_autoprompt)
        else:
            dispatcher = SearchDispatcher(resolver, client_factory, use_autoprompt)
        return cls(resolver, dispatcher)

    # ------------------------------------------------------------------
    # API key management
    # ------------------------------------------------------------------

    async def set_api_key(self, workspace_id: Optional[WorkspaceId], api_key: str) -> str:
        if not _has_workspace(workspace_id):
            return NO_WORKSPACE
        try:
            await asyncio.to_thread(self.resolver.store_api_key, workspace_id, api_key)
        except Exception as e:
            logger.error("Saving API key failed for workspace %s: %s", workspace_id, e)
            return _error("Error saving API key", e)
        return API_KEY_SAVED

    async def check_api_key(self, workspace_id: Optional[WorkspaceId]) -> str:
        if not _has_workspace(workspace_id):
            return NO_WORKSPACE
        try:
            status = await asyncio.to_thread(self.resolver.check, workspace_id)
        except Exception as e:
            logger.error("Checking API key failed for workspace %s: %s", workspace_id, e)
            return _error("Error checking API key", e)
        return STATUS_MESSAGES[status]

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(
        self,
        workspace_id: Optional[WorkspaceId],
        request: SearchRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        if not _has_workspace(workspace_id):
            return NO_WORKSPACE_RETRY
        try:
            return await self.dispatcher.search(workspace_id, request, ctx)
        except Exception as e:
            logger.exception("Exa search failed")
            return _error("Error performing search", e)

    async def get_contents(
        self,
        workspace_id: Optional[WorkspaceId],
        request: ContentRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        if not _has_workspace(workspace_id):
            return NO_WORKSPACE_RETRY
        try:
            return await self.dispatcher.get_contents(workspace_id, request, ctx)
        except Exception as e:
            logger.exception("Exa content retrieval failed")
            return _error("Error performing content retrieval", e)

    async def find_similar(
        self,
        workspace_id: Optional[WorkspaceId],
        request: SimilarityRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        if not _has_workspace(workspace_id):
            return NO_WORKSPACE_RETRY
        try:
            return await self.dispatcher.find_similar(workspace_id, request, ctx)
        except Exception as e:
            logger.exception("Exa similarity search failed")
            return _error("Error performing similarity search", e)

    async def advanced_search(
        self,
        workspace_id: Optional[WorkspaceId],
        request: AdvancedSearchRequest,
        ctx: Optional[Context] = None,
    ) -> str:
        if not _has_workspace(workspace_id):
            return NO_WORKSPACE_RETRY
        try:
            return await self.dispatcher.advanced_search(workspace_id, request, ctx)
        except Exception as e:
            logger.exception("Exa advanced search failed")
            return _error("Error performing advanced search", e)


_agent: Optional[ExaSearchAgent] = None


def get_agent() -> ExaSearchAgent:
    """Process-wide agent, built from settings on first use."""
    global _agent
    if _agent is None:
        settings = get_settings()
        _agent = ExaSearchAgent.create(
            build_workspace_store(),
            default_api_key=settings.exa_api_key,
            use_autoprompt=settings.exa_use_autoprompt,
        )
    return _agent


def set_agent(agent: Optional[ExaSearchAgent]) -> None:
    """Replace the process-wide agent. None rebuilds it from settings on next use."""
    global _agent
    _agent = agent
