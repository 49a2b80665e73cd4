from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, List, Optional

from models.company_record import CompanyRecord
from models.query import QueryResult
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    document: Optional[str] = None
    companies: List[CompanyRecord] = field(default_factory=list)
    result: Optional[QueryResult] = None
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: Optional[RunContext] = None) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        ctx = ctx or RunContext()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
