from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from config.settings import get_settings
from models.company_record import CompanyRecord
from services.document_parser import parse_companies
from sources.base import DocumentSource


class CompanyDirectory:
    """Last parsed copy of the directory, refetched once it goes stale.

    Refreshes are not coordinated; callers that share an instance across
    threads must serialize `refresh()` themselves.
    """

    def __init__(
        self,
        source: DocumentSource,
        stale_after_seconds: Optional[int] = None,
        refetch_interval_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        settings = get_settings()
        self.source = source
        self.stale_after_seconds = (
            stale_after_seconds if stale_after_seconds is not None else settings.stale_after_seconds
        )
        self.refetch_interval_seconds = (
            refetch_interval_seconds if refetch_interval_seconds is not None else settings.refetch_interval_seconds
        )
        self._clock = clock
        self._companies: List[CompanyRecord] = []
        self._fetched_at: Optional[float] = None

    @property
    def fetched_at(self) -> Optional[float]:
        return self._fetched_at

    def _age(self) -> Optional[float]:
        if self._fetched_at is None:
            return None
        return self._clock() - self._fetched_at

    def is_stale(self) -> bool:
        age = self._age()
        return age is None or age >= self.stale_after_seconds

    def refresh_due(self) -> bool:
        age = self._age()
        return age is None or age >= self.refetch_interval_seconds

    def refresh(self) -> List[CompanyRecord]:
        """Fetch and parse now. On FetchError the previous records are kept."""
        document = self.source.fetch_document()
        self._companies = parse_companies(document)
        self._fetched_at = self._clock()
        logging.info(f"Directory refreshed: {len(self._companies)} companies")
        return list(self._companies)

    def companies(self, force_refresh: bool = False) -> List[CompanyRecord]:
        if force_refresh or self.is_stale():
            return self.refresh()
        return list(self._companies)
