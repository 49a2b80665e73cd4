from __future__ import annotations

import math
import unicodedata
from typing import Iterable, List, Optional, Sequence, Tuple

from models.company_record import CompanyRecord
from models.query import QueryParams, QueryResult


SORTABLE_FIELDS = ("name", "location")
SORT_DIRECTIONS = ("asc", "desc")


def _fold(text: Optional[str]) -> str:
    return (text or "").casefold()


def collation_key(text: Optional[str]) -> Tuple[str, str]:
    """Locale-style comparison key: accents and case are secondary to the base letters."""
    value = unicodedata.normalize("NFKD", text or "")
    base = "".join(ch for ch in value if not unicodedata.combining(ch))
    return base.casefold(), value


def matches_search(company: CompanyRecord, search_term: Optional[str]) -> bool:
    term = _fold(search_term).strip()
    if not term:
        return True
    return term in _fold(company.name) or term in _fold(company.location)


def matches_technologies(company: CompanyRecord, selected: Optional[Iterable[str]]) -> bool:
    wanted = {_fold(tech).strip() for tech in (selected or []) if tech and tech.strip()}
    if not wanted:
        return True
    have = {_fold(tech) for tech in company.technologies}
    return wanted.issubset(have)


def filter_companies(
    companies: Sequence[CompanyRecord],
    search_term: Optional[str] = "",
    selected_technologies: Optional[Iterable[str]] = None,
) -> List[CompanyRecord]:
    selected = list(selected_technologies or [])
    return [
        c for c in companies
        if matches_search(c, search_term) and matches_technologies(c, selected)
    ]


def sort_companies(
    companies: Sequence[CompanyRecord],
    sort_field: str = "name",
    sort_direction: str = "asc",
) -> List[CompanyRecord]:
    """Stable sort; equal keys keep their input order in both directions."""
    if sort_field not in SORTABLE_FIELDS:
        raise ValueError(f"Unsupported sort field: {sort_field}")
    if sort_direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unsupported sort direction: {sort_direction}")
    return sorted(
        companies,
        key=lambda c: collation_key(getattr(c, sort_field)),
        reverse=(sort_direction == "desc"),
    )


def toggle_direction(sort_direction: str) -> str:
    return "desc" if sort_direction == "asc" else "asc"


def total_pages_for(total_count: int, page_size: int) -> int:
    # Zero records means zero pages
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return math.ceil(total_count / page_size) if total_count > 0 else 0


def paginate(companies: Sequence[CompanyRecord], page: int, page_size: int) -> List[CompanyRecord]:
    """1-based slice; pages outside the available range are empty."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(companies[start:start + page_size])


def query_companies(
    companies: Sequence[CompanyRecord],
    search_term: Optional[str] = "",
    selected_technologies: Optional[Iterable[str]] = None,
    sort_field: str = "name",
    sort_direction: str = "asc",
    page: int = 1,
    page_size: int = 15,
) -> QueryResult:
    """Filter, sort and paginate parsed records.

    Callers must reset `page` to 1 whenever the filter or sort parameters
    change; `QueryParams.with_changes` does that for them.
    """
    matched = filter_companies(companies, search_term, selected_technologies)
    ordered = sort_companies(matched, sort_field, sort_direction)
    return QueryResult(
        items=paginate(ordered, page, page_size),
        matches=ordered,
        total_count=len(ordered),
        total_pages=total_pages_for(len(ordered), page_size),
        page=page,
        page_size=page_size,
    )


def run_query(companies: Sequence[CompanyRecord], params: QueryParams) -> QueryResult:
    return query_companies(
        companies,
        search_term=params.search_term,
        selected_technologies=params.selected_technologies,
        sort_field=params.sort_field,
        sort_direction=params.sort_direction,
        page=params.page,
        page_size=params.page_size,
    )
