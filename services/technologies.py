from __future__ import annotations

from typing import Dict, Iterable, List

from models.company_record import CompanyRecord


TECH_COLOR_PALETTE = [
    "sky",
    "green",
    "amber",
    "rose",
    "indigo",
    "pink",
    "teal",
    "purple",
]

_FNV_OFFSET_BASIS = 0x811C9DC5
_FNV_PRIME = 0x01000193


def fnv1a_32(text: str) -> int:
    value = _FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def tech_color_index(tag: str, palette_size: int = len(TECH_COLOR_PALETTE)) -> int:
    """Stable palette slot for a technology tag; identical tags always share a color."""
    if palette_size < 1:
        raise ValueError("palette_size must be >= 1")
    return fnv1a_32(tag) % palette_size


def tech_color(tag: str) -> str:
    return TECH_COLOR_PALETTE[tech_color_index(tag)]


def unique_technologies(companies: Iterable[CompanyRecord]) -> List[str]:
    """Filter-menu entries: first spelling wins, compared case-insensitively."""
    seen: Dict[str, str] = {}
    for company in companies:
        for tech in company.technologies:
            seen.setdefault(tech.casefold(), tech)
    return sorted(seen.values(), key=lambda t: (t.casefold(), t))


def technology_counts(companies: Iterable[CompanyRecord]) -> Dict[str, int]:
    """Number of companies listing each technology (a company counts once per tag)."""
    spelling: Dict[str, str] = {}
    counts: Dict[str, int] = {}
    for company in companies:
        for key in {tech.casefold(): None for tech in company.technologies}:
            counts[key] = counts.get(key, 0) + 1
        for tech in company.technologies:
            spelling.setdefault(tech.casefold(), tech)
    return {spelling[key]: counts[key] for key in sorted(counts, key=lambda k: (-counts[k], k))}


def directory_stats(companies: Iterable[CompanyRecord]) -> Dict[str, int]:
    companies = list(companies)
    return {
        "total_companies": len(companies),
        "total_technologies": len(unique_technologies(companies)),
    }
