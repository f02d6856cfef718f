import asyncio

from mcp.shared.memory import create_connected_server_and_client_session

from exasearch.agent import NO_WORKSPACE, STATUS_MESSAGES
from exasearch.config import reset_settings_cache
from exasearch.credentials import CredentialStatus
from exasearch.mcp_server import mcp
from exasearch.tools.context import workspace_id_from_context
from exasearch.tools.search.schemas import MAX_RESULTS, MIN_RESULTS

TOOL_NAMES = {"setExaApiKey", "checkExaApiKey", "search", "getContents", "findSimilar", "advancedSearch"}


def test_all_tools_are_registered():
    tools = asyncio.run(mcp.list_tools())

    assert {tool.name for tool in tools} == TOOL_NAMES


def test_tool_schemas_hide_the_context_parameter():
    tools = {tool.name: tool for tool in asyncio.run(mcp.list_tools())}

    properties = tools["advancedSearch"].inputSchema["properties"]
    assert "ctx" not in properties
    assert {"query", "numResults", "includeDomains", "excludeDomains", "category"} <= set(properties)
    assert tools["search"].inputSchema["required"] == ["query"]


def test_workspace_falls_back_to_configured_id(monkeypatch):
    monkeypatch.setenv("EXA_WORKSPACE_ID", "ws-env")
    reset_settings_cache()

    assert workspace_id_from_context(None) == "ws-env"


def test_workspace_is_none_without_context_or_fallback():
    assert workspace_id_from_context(None) is None


def test_tool_call_outside_request_uses_fallback_workspace(monkeypatch, agent, exa):
    monkeypatch.setenv("EXA_WORKSPACE_ID", "ws-env")
    reset_settings_cache()
    asyncio.run(agent.set_api_key("ws-env", "env-workspace-key"))

    asyncio.run(mcp.call_tool("advancedSearch", {"query": "q", "excludeDomains": ["b.com"]}))

    client = exa.last
    assert client.api_key == "env-workspace-key"
    name, args, kwargs = client.calls[0]
    assert (name, args) == ("search", ("q",))
    assert kwargs["exclude_domains"] == ["b.com"]
    assert "include_domains" not in kwargs


def test_search_tools_advertise_result_count_bounds():
    tools = {tool.name: tool for tool in asyncio.run(mcp.list_tools())}

    for name in ("search", "findSimilar", "advancedSearch"):
        num_results = tools[name].inputSchema["properties"]["numResults"]
        assert num_results["minimum"] == MIN_RESULTS
        assert num_results["maximum"] == MAX_RESULTS
        assert num_results["default"] == 5
        assert num_results["description"] == "Number of results to return"


async def call_in_session(name, arguments, meta=None):
    async with create_connected_server_and_client_session(mcp._mcp_server) as session:
        result = await session.call_tool(name, arguments, meta=meta)
    return result.content[0].text


def test_session_reads_workspace_from_request_meta(agent):
    asyncio.run(agent.set_api_key(42, "workspace-42-key"))

    text = asyncio.run(call_in_session("checkExaApiKey", {}, meta={"workspaceId": 42}))

    assert text == STATUS_MESSAGES[CredentialStatus.WORKSPACE]


def test_session_meta_selects_the_workspace_key(agent, exa):
    asyncio.run(agent.set_api_key(42, "workspace-42-key"))

    asyncio.run(call_in_session("search", {"query": "q", "numResults": 99}, meta={"workspaceId": 42}))

    assert exa.last.api_key == "workspace-42-key"
    assert exa.last.calls[0][2]["num_results"] == MAX_RESULTS


def test_session_without_meta_or_fallback_has_no_workspace(agent, exa):
    text = asyncio.run(call_in_session("checkExaApiKey", {}))

    assert text == NO_WORKSPACE
    assert exa.clients == []
