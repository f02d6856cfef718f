from __future__ import annotations

from typing import Protocol

WorkspaceId = int | str


class WorkspaceStoreError(Exception):
    """Raised when workspace storage cannot be read or written."""


class WorkspaceStore(Protocol):
    """Key-value storage scoped to a workspace."""

    def get(self, workspace_id: WorkspaceId, key: str) -> bytes | None:
        ...

    def put(
        self,
        workspace_id: WorkspaceId,
        key: str,
        data: bytes,
        *,
        skip_summarizer: bool = False,
    ) -> None:
        ...
