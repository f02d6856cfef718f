"""Pluggable workspace storage backends."""

from exasearch.config import get_settings
from exasearch.workspace.file_store import FileWorkspaceStore
from exasearch.workspace.interface import WorkspaceId, WorkspaceStore, WorkspaceStoreError
from exasearch.workspace.memory_store import InMemoryWorkspaceStore


def build_workspace_store() -> WorkspaceStore:
    settings = get_settings()
    backend = settings.workspace_store.strip().lower()
    if backend == "file":
        return FileWorkspaceStore(settings.workspace_store_dir)
    if backend == "memory":
        return InMemoryWorkspaceStore()
    raise ValueError(
        f"Unsupported WORKSPACE_STORE={settings.workspace_store!r}. "
        "Use 'file' or 'memory'."
    )


__all__ = [
    "WorkspaceId",
    "WorkspaceStore",
    "WorkspaceStoreError",
    "FileWorkspaceStore",
    "InMemoryWorkspaceStore",
    "build_workspace_store",
]
