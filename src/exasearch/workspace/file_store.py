from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from .interface import WorkspaceId, WorkspaceStoreError


class FileWorkspaceStore:
    """File-based workspace store with atomic writes.

    Each workspace gets its own directory under ``base_dir``; keys map to file
    names inside it. There is no summarizer on local disk, so
    ``skip_summarizer`` is accepted and ignored.
    """

    def __init__(self, base_dir: str) -> None:
        self._base = Path(base_dir)

    @staticmethod
    def _safe(part: str) -> str:
        # Percent-encoding is injective; dots are encoded so "." and ".." stay plain names.
        return quote(part, safe="").replace(".", "%2E")

    def _path(self, workspace_id: WorkspaceId, key: str) -> Path:
        return self._base / self._safe(str(workspace_id)) / self._safe(key)

    def get(self, workspace_id: WorkspaceId, key: str) -> bytes | None:
        path = self._path(workspace_id, key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as exc:
            raise WorkspaceStoreError(f"Cannot read {key!r}: {exc}") from exc

    def put(
        self,
        workspace_id: WorkspaceId,
        key: str,
        data: bytes,
        *,
        skip_summarizer: bool = False,
    ) -> None:
        path = self._path(workspace_id, key)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            tmp_path.replace(path)
        except OSError as exc:
            raise WorkspaceStoreError(f"Cannot write {key!r}: {exc}") from exc
