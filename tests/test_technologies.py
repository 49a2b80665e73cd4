from __future__ import annotations

import pytest

from models.company_record import CompanyRecord
from services.technologies import (
    TECH_COLOR_PALETTE,
    directory_stats,
    fnv1a_32,
    tech_color,
    tech_color_index,
    technology_counts,
    unique_technologies,
)


def test_fnv1a_reference_values():
    assert fnv1a_32("") == 0x811C9DC5
    assert fnv1a_32("a") == 0xE40C292C
    assert fnv1a_32("foobar") == 0xBF9CF968


def test_color_index_is_stable_and_in_range():
    for tag in ["Go", "React", "Python", "C#", "বাংলা"]:
        idx = tech_color_index(tag)
        assert 0 <= idx < len(TECH_COLOR_PALETTE)
        assert tech_color_index(tag) == idx
        assert tech_color(tag) == TECH_COLOR_PALETTE[idx]
    assert tech_color_index("Go", palette_size=1) == 0
    with pytest.raises(ValueError):
        tech_color_index("Go", palette_size=0)


def test_unique_technologies_dedupes_case_insensitively():
    companies = [
        CompanyRecord(name="A", technologies=["react", "Go"]),
        CompanyRecord(name="B", technologies=["React", "Python", "go"]),
    ]
    assert unique_technologies(companies) == ["Go", "Python", "react"]


def test_technology_counts_and_stats():
    companies = [
        CompanyRecord(name="A", technologies=["Go", "React", "go"]),
        CompanyRecord(name="B", technologies=["Go"]),
        CompanyRecord(name="C"),
    ]
    assert technology_counts(companies) == {"Go": 2, "React": 1}
    assert list(technology_counts(companies)) == ["Go", "React"]
    assert directory_stats(companies) == {"total_companies": 3, "total_technologies": 2}
