from __future__ import annotations

from .interface import WorkspaceId


class InMemoryWorkspaceStore:
    """Dict-backed workspace store. Contents are lost when the process exits."""

    def __init__(self) -> None:
        self._files: dict[tuple[str, str], bytes] = {}
        # Keys written with skip_summarizer=True
        self.unsummarized: set[tuple[str, str]] = set()

    def get(self, workspace_id: WorkspaceId, key: str) -> bytes | None:
        return self._files.get((str(workspace_id), key))

    def put(
        self,
        workspace_id: WorkspaceId,
        key: str,
        data: bytes,
        *,
        skip_summarizer: bool = False,
    ) -> None:
        slot = (str(workspace_id), key)
        self._files[slot] = bytes(data)
        if skip_summarizer:
            self.unsummarized.add(slot)
        else:
            self.unsummarized.discard(slot)
