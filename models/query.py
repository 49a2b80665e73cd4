from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.company_record import CompanyRecord


SortField = Literal["name", "location"]
SortDirection = Literal["asc", "desc"]

# Parameters whose change invalidates the current page number
_RESETTING_FIELDS = ("search_term", "selected_technologies", "sort_field", "sort_direction", "page_size")


class QueryParams(BaseModel):
    """User-supplied view parameters for one listing request."""

    search_term: str = ""
    selected_technologies: list[str] = Field(default_factory=list)
    sort_field: SortField = "name"
    sort_direction: SortDirection = "asc"
    page: int = 1
    page_size: int = Field(default=15, ge=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("selected_technologies", mode="before")
    @classmethod
    def _clean_selected(cls, value):
        if value is None:
            return []
        return [str(tech).strip() for tech in value if str(tech).strip()]

    def with_changes(self, **changes) -> "QueryParams":
        """Copy with `changes` applied; filter, sort or page size changes reset to page 1."""
        data = self.model_dump()
        data.update(changes)
        if "page" not in changes and any(
            key in changes and changes[key] != getattr(self, key) for key in _RESETTING_FIELDS
        ):
            data["page"] = 1
        return QueryParams(**data)


class QueryResult(BaseModel):
    """Filtered, sorted view plus the requested page slice."""

    items: list[CompanyRecord]
    matches: list[CompanyRecord]
    total_count: int
    total_pages: int
    page: int
    page_size: int

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0
