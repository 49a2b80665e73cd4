from __future__ import annotations

from typing import Optional

from models.query import QueryParams
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import FetchDocument, ParseCompanies, QueryCompanies
from sources.base import DocumentSource


def browse_companies(source: DocumentSource, params: Optional[QueryParams] = None) -> RunContext:
    """Fetch, parse and query in one run. Raises FetchError when the source fails."""
    pipeline = Pipeline([
        FetchDocument(source),
        ParseCompanies(),
        QueryCompanies(params),
    ])
    return pipeline.run(RunContext())
