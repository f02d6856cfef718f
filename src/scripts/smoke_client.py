"""
Smoke test against a running Exa Search Agent MCP server (SSE).

    exa-search-agent &
    python src/scripts/smoke_client.py "neural search engines" --workspace demo
"""
import argparse
import asyncio

from mcp import ClientSession
from mcp.client.sse import sse_client


async def smoke(server_url: str, workspace: str, query: str) -> None:
    print(f"Connecting to {server_url}...")

    async with sse_client(server_url) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            tools = await session.list_tools()
            print(f"Available tools: {[t.name for t in tools.tools]}\n")

            async def progress_callback(progress: float, total: float | None, message: str | None):
                print(f"Progress: {progress}/{total} - {message}")

            meta = {"workspaceId": workspace, "progressToken": "smoke"}

            status = await session.call_tool("checkExaApiKey", {}, meta=meta)
            print(status.content[0].text, "\n")

            result = await session.call_tool(
                "search",
                {"query": query, "numResults": 3},
                meta=meta,
                progress_callback=progress_callback,
            )
            print()
            print(result.content[0].text)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("query")
    parser.add_argument("--url", default="http://localhost:7378/sse")
    parser.add_argument("--workspace", default="smoke")
    args = parser.parse_args()
    asyncio.run(smoke(args.url, args.workspace, args.query))


if __name__ == "__main__":
    main()
