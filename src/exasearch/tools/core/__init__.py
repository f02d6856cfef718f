"""
Registry-backed tools. Importing a tool module registers its tools in TOOL_REGISTRY.
"""


def load_tools() -> None:
    """Import every tool module so its @tool decorators run."""
    from .api_key import tool as api_key_tool  # noqa: F401
    from .search import tool as search_tool  # noqa: F401
