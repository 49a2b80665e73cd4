from __future__ import annotations

from typing import Optional

from config.settings import get_settings
from models.query import QueryParams
from pipelines.runner import RunContext
from services.company_query import run_query


class QueryCompanies:
    def __init__(self, params: Optional[QueryParams] = None) -> None:
        self.params = params or QueryParams(page_size=get_settings().page_size)

    def run(self, ctx: RunContext) -> RunContext:
        ctx.result = run_query(ctx.companies or [], self.params)
        ctx.meta["matched_companies"] = ctx.result.total_count
        return ctx
