from __future__ import annotations

import logging
import time

from pipelines.runner import RunContext
from sources.base import DocumentSource, FetchError


class FetchDocument:
    def __init__(self, source: DocumentSource) -> None:
        self.source = source

    def run(self, ctx: RunContext) -> RunContext:
        source_name = getattr(self.source, "source_name", type(self.source).__name__)
        t0 = time.time()
        try:
            ctx.document = self.source.fetch_document()
        except FetchError as e:
            logging.error(
                "Document fetch failed",
                extra={"step": "fetch_document", "status": "error", "source": source_name, "error": str(e)},
            )
            raise
        ctx.meta["document_chars"] = len(ctx.document or "")
        ctx.meta["source_name"] = source_name
        logging.info(
            "Document fetched",
            extra={
                "step": "fetch_document",
                "status": "ok",
                "source": source_name,
                "duration_ms": int((time.time() - t0) * 1000),
            },
        )
        return ctx
