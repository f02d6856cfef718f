"""
Exa Search Agent - FastAPI application exposing the tools over JSON-RPC.
"""
import logging

from fastapi import FastAPI

from . import __version__
from .config import get_settings
from .logging_config import setup_logging
from .mcp.server import router as mcp_router

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Exa Search Agent",
    description="Exa neural search, content retrieval and similar-page lookup as MCP tools",
    version=__version__
)

# Include MCP router
app.include_router(mcp_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Exa Search Agent",
        "version": __version__,
        "status": "operational"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event():
    """
    Run on startup.
    Load all tools from tools/core/
    """
    setup_logging()
    logger.info("Exa Search Agent starting...")

    from .tools.core import load_tools
    load_tools()

    from .tools.base import TOOL_REGISTRY
    logger.info("Loaded %d tools: %s", len(TOOL_REGISTRY), ", ".join(TOOL_REGISTRY))


def run() -> None:
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
