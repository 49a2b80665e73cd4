from __future__ import annotations

import logging
import time

from pipelines.runner import RunContext
from services.document_parser import parse_companies


class ParseCompanies:
    def run(self, ctx: RunContext) -> RunContext:
        t0 = time.time()
        ctx.companies = parse_companies(ctx.document or "")
        ctx.meta["parsed_companies"] = len(ctx.companies)
        logging.info(
            f"Parsed {len(ctx.companies)} companies",
            extra={"step": "parse_companies", "status": "ok", "duration_ms": int((time.time() - t0) * 1000)},
        )
        return ctx
