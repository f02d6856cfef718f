"""
Exa Search Agent MCP Server - SSE Transport.
"""
import logging

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from exasearch.agent import SYSTEM_PROMPT
from exasearch.config import get_settings
from exasearch.logging_config import setup_logging
from exasearch.tools import register_all_tools

load_dotenv()

logger = logging.getLogger(__name__)

settings = get_settings()

mcp = FastMCP(
    name="exa-search-agent",
    instructions=SYSTEM_PROMPT,
    host=settings.host,
    port=settings.port,
)
register_all_tools(mcp)


def main() -> None:
    setup_logging()
    logger.info("Exa Search Agent is running on port %s", settings.port)
    mcp.run(transport="sse")


if __name__ == "__main__":
    main()
