"""
Tool registry and decorator for Exa Search Agent.
NOTE:
1. Tools are a static mapping from name to handler; nothing is looked up dynamically.
2. The input schema comes from each tool's pydantic arguments model, so the schema
   agents see and the validation applied to calls are the same thing.
"""
from typing import Callable

from pydantic import BaseModel

from .schemas import ToolDefinition, ToolHandler

# In-memory storage for all registered tools
TOOL_REGISTRY: dict[str, ToolDefinition] = {}


def get_all_tools() -> list[ToolDefinition]:
    """Return all registered tools."""
    return list(TOOL_REGISTRY.values())


def get_tool(name: str) -> ToolDefinition | None:
    """Get a tool by name."""
    return TOOL_REGISTRY.get(name)


def tool(name: str, description: str, arguments: type[BaseModel]) -> Callable:
    """
    Decorator to register an async handler as a tool.

    Usage:
        @tool(name="search", description="Web search", arguments=SearchRequest)
        async def search(args: SearchRequest, workspace_id) -> str:
            ...

    The handler is returned unchanged.
    """
    def decorator(func: ToolHandler) -> ToolHandler:
        TOOL_REGISTRY[name] = ToolDefinition(
            name=name,
            description=description,
            arguments=arguments,
            function=func
        )
        return func

    return decorator
