"""
Process configuration for Exa Search Agent.

Values are read from the environment once and cached. Entry points load a
local .env file before the first read.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

DEFAULT_PORT = 7378


@dataclass(slots=True)
class Settings:
    """Exa Search Agent settings."""

    # Process-wide default credential, empty when none is configured
    exa_api_key: str = ""
    exa_use_autoprompt: bool = False

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Workspace storage: "file" or "memory"
    workspace_store: str = "file"
    workspace_store_dir: str = ".exa_workspaces"
    # Used when an MCP client does not send a workspace id
    default_workspace_id: Optional[str] = None

    log_level: str = "INFO"


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _env_bool(key: str, default: bool = False) -> bool:
    value = _env(key)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read the environment and return Settings."""
    try:
        port = int(_env("PORT", str(DEFAULT_PORT)))
    except ValueError:
        port = DEFAULT_PORT

    return Settings(
        exa_api_key=_env("EXA_API_KEY", "") or "",
        exa_use_autoprompt=_env_bool("EXA_USE_AUTOPROMPT"),
        host=_env("HOST", "0.0.0.0"),
        port=port,
        workspace_store=(_env("WORKSPACE_STORE", "file") or "file").lower(),
        workspace_store_dir=_env("WORKSPACE_STORE_DIR", ".exa_workspaces"),
        default_workspace_id=_env("EXA_WORKSPACE_ID"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def reset_settings_cache() -> None:
    """Clear the cached settings (tests)."""
    get_settings.cache_clear()
