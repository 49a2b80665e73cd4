from __future__ import annotations

from pathlib import Path

from sources.base import FetchError
from sources.registry import register


class LocalFileSource:
    """Reads a saved copy of the directory document (offline use, fixtures)."""

    source_name = "local_file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch_document(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(f"Failed to read {self.path}: {e}", source=str(self.path)) from e


def _register():
    register(LocalFileSource.source_name, LocalFileSource)


_register()
