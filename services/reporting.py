from __future__ import annotations

from typing import Any, Dict, Optional

from models.query import QueryParams, QueryResult
from services.pagination import page_window
from services.technologies import tech_color


NO_RESULTS_MESSAGE = "No companies found matching your criteria."


def result_to_dict(result: QueryResult, params: Optional[QueryParams] = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "page": result.page,
        "page_size": result.page_size,
        "total_count": result.total_count,
        "total_pages": result.total_pages,
        "page_window": page_window(result.page, result.total_pages),
        "companies": [
            {
                "name": company.name,
                "location": company.location,
                "technologies": list(company.technologies),
                "links": [
                    {"url": link.url, "label": link.label, "domain": link.domain}
                    for link in company.links
                ],
                "website": company.website,
            }
            for company in result.items
        ],
    }
    if params is not None:
        data["query"] = params.model_dump()
    return data


def print_page(result: QueryResult, total_companies: Optional[int] = None) -> None:
    """Print one page of the listing with a summary banner."""
    print("\n" + "="*60)
    print("TECH COMPANIES DIRECTORY")
    print("="*60)
    total = total_companies if total_companies is not None else result.total_count
    print(f"Showing {result.total_count} of {total} companies")
    if result.is_empty:
        print()
        print(NO_RESULTS_MESSAGE)
        print("="*60)
        return

    for company in result.items:
        print()
        print(company.name)
        if company.location:
            print(f"  Location: {company.location}")
        if company.technologies:
            tags = ", ".join(f"{tech} ({tech_color(tech)})" for tech in company.technologies)
            print(f"  Technologies: {tags}")
        for link in company.links:
            domain = link.domain
            suffix = f" ({domain})" if domain else ""
            print(f"  {link.label or 'Link'}: {link.url}{suffix}")

    print()
    pages = " ".join(str(p) for p in page_window(result.page, result.total_pages))
    print(f"Page {result.page} of {result.total_pages}: {pages}")
    if not result.items:
        print(f"Page {result.page} is out of range")
    print("="*60)
