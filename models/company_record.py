from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.domain_utils import extract_apex_domain


class CompanyLink(BaseModel):
    """One `<url>[<label>]` occurrence from the document; label only drives display."""

    url: str
    label: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def domain(self) -> str | None:
        return extract_apex_domain(self.url)


class CompanyRecord(BaseModel):
    """One directory row, in document order. Immutable once parsed."""

    name: str = Field(min_length=1)
    location: str = ""
    technologies: list[str] = Field(default_factory=list)
    links: list[CompanyLink] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("name", "location", mode="before")
    @classmethod
    def _strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("technologies", mode="before")
    @classmethod
    def _clean_technologies(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [str(tech).strip() for tech in value if str(tech).strip()]

    @property
    def website(self) -> str | None:
        """URL of the link labelled "Website", else the first link."""
        for link in self.links:
            if link.label.strip().lower() == "website":
                return link.url
        return self.links[0].url if self.links else None
