from __future__ import annotations

from typing import Optional, Protocol


class FetchError(Exception):
    """The directory document could not be retrieved."""

    def __init__(self, message: str, source: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.source = source
        self.status_code = status_code


class DocumentSource(Protocol):
    source_name: str

    def fetch_document(self) -> str:
        ...
