"""
Exa Search Agent - Exa neural search exposed as MCP tools.
"""

__version__ = "0.1.0"
