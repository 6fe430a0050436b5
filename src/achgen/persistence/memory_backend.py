"""In-memory file store for tests and local development."""

from __future__ import annotations

from achgen.core.exceptions import FileStoreError


class MemoryFileStore:
    """Dict-backed IFileStore."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError as exc:
            raise FileStoreError(f"No such file: {path!r}") from exc

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        self._files[path] = data
        return path

    def list_files(self, prefix: str) -> list[str]:
        return [k for k in self._files if k.startswith(prefix)]
