"""
Per-workspace Exa API key lookup and storage.

The key lives in the workspace as a small JSON file. Resolution never fails:
anything that goes wrong falls back to the process-wide default key.
"""
import json
import logging
from dataclasses import dataclass
from enum import Enum

from .workspace import WorkspaceId, WorkspaceStore

logger = logging.getLogger(__name__)

CONFIG_KEY = ".exa_config"


class CredentialSource(str, Enum):
    WORKSPACE = "workspace"
    DEFAULT = "default"


class CredentialStatus(str, Enum):
    NOT_CONFIGURED = "not_configured"
    DEFAULT = "default"
    WORKSPACE = "workspace"


class CredentialStoreError(Exception):
    """Raised when the workspace key cannot be saved."""


@dataclass(frozen=True)
class CredentialResolution:
    """Outcome of a key lookup.

    ``reason`` says why the default was used (``not_found``, ``read_failed``,
    ``invalid_json``, ``missing_key``) and is None for workspace hits.
    """

    value: str
    source: CredentialSource
    reason: str | None = None


class CredentialResolver:
    """Resolves, stores and classifies the Exa API key of a workspace."""

    def __init__(self, store: WorkspaceStore, default_api_key: str = ""):
        self.store = store
        self.default_api_key = default_api_key or ""

    def _fallback(self, reason: str) -> CredentialResolution:
        return CredentialResolution(
            value=self.default_api_key,
            source=CredentialSource.DEFAULT,
            reason=reason,
        )

    def resolve(self, workspace_id: WorkspaceId) -> CredentialResolution:
        try:
            raw = self.store.get(workspace_id, CONFIG_KEY)
        except Exception as e:
            logger.warning("Error retrieving API key for workspace %s: %s", workspace_id, e)
            return self._fallback("read_failed")

        if raw is None:
            return self._fallback("not_found")

        try:
            config = json.loads(raw.decode("utf-8") if isinstance(raw, bytes) else raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Error parsing %s for workspace %s: %s", CONFIG_KEY, workspace_id, e)
            return self._fallback("invalid_json")

        api_key = config.get("apiKey") if isinstance(config, dict) else None
        if not api_key or not isinstance(api_key, str):
            return self._fallback("missing_key")

        return CredentialResolution(value=api_key, source=CredentialSource.WORKSPACE)

    def resolve_api_key(self, workspace_id: WorkspaceId) -> str:
        return self.resolve(workspace_id).value

    def store_api_key(self, workspace_id: WorkspaceId, api_key: str) -> None:
        payload = json.dumps({"apiKey": api_key}).encode("utf-8")
        try:
            self.store.put(workspace_id, CONFIG_KEY, payload, skip_summarizer=True)
        except Exception as e:
            raise CredentialStoreError(str(e)) from e
        logger.info("Stored Exa API key for workspace %s", workspace_id)

    def check(self, workspace_id: WorkspaceId) -> CredentialStatus:
        api_key = self.resolve_api_key(workspace_id)
        if api_key != self.default_api_key:
            return CredentialStatus.WORKSPACE
        if self.default_api_key == "":
            return CredentialStatus.NOT_CONFIGURED
        return CredentialStatus.DEFAULT
