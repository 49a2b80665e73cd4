import argparse
import json
import logging
import sys

from pydantic import ValidationError

from config.settings import get_settings
from models.query import QueryParams
from pipelines.browse_companies import browse_companies
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import FetchDocument, ParseCompanies
from services.reporting import print_page, result_to_dict
from services.technologies import directory_stats, technology_counts, unique_technologies
from sources.base import FetchError
from sources.registry import get_source
from utils.logging_setup import init_logging
import sources  # noqa: F401 ensure registration


def _resolve_source(args):
    if args.input:
        return get_source("local_file", path=args.input)
    return get_source("github_readme", url=args.url)


def _load_companies(args):
    ctx = Pipeline([
        FetchDocument(_resolve_source(args)),
        ParseCompanies(),
    ]).run(RunContext())
    return ctx.companies


def cmd_browse(args):
    settings = get_settings()
    params = QueryParams(
        search_term=args.search or "",
        selected_technologies=args.tech or [],
        sort_field=args.sort_by,
        sort_direction=args.order,
        page=args.page,
        page_size=args.page_size if args.page_size is not None else settings.page_size,
    )
    ctx = browse_companies(_resolve_source(args), params)
    if args.json:
        print(json.dumps(result_to_dict(ctx.result, params), indent=2, ensure_ascii=False))
        return
    print_page(ctx.result, total_companies=len(ctx.companies))


def cmd_technologies(args):
    companies = _load_companies(args)
    if args.counts:
        for tech, count in technology_counts(companies).items():
            print(f"{tech}: {count}")
        return
    for tech in unique_technologies(companies):
        print(tech)


def cmd_stats(args):
    companies = _load_companies(args)
    print(json.dumps(directory_stats(companies), indent=2))


def main():
    settings = get_settings()
    # stdout carries the listing or JSON; logs go to stderr
    init_logging(settings.log_level, stream=sys.stderr)
    parser = argparse.ArgumentParser(description="Tech company directory browser")
    src = parser.add_mutually_exclusive_group()
    src.add_argument("--input", help="Read the directory document from a local file")
    src.add_argument("--url", help="Directory document URL (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_browse = sub.add_parser("browse", help="Search, filter, sort and page through companies")
    p_browse.add_argument("--search", "-q", default="", help="Case-insensitive text matched against name and location")
    p_browse.add_argument("--tech", "-t", action="append", help="Required technology (repeatable; all must match)")
    p_browse.add_argument("--sort-by", choices=["name", "location"], default="name")
    p_browse.add_argument("--order", choices=["asc", "desc"], default="asc")
    p_browse.add_argument("--page", type=int, default=1, help="1-based page number")
    p_browse.add_argument("--page-size", type=int, default=None, help=f"Companies per page (default: {settings.page_size})")
    p_browse.add_argument("--json", action="store_true", help="Print the page as JSON")
    p_browse.set_defaults(func=cmd_browse)

    p_tech = sub.add_parser("technologies", help="List distinct technologies")
    p_tech.add_argument("--counts", action="store_true", help="Show how many companies use each technology")
    p_tech.set_defaults(func=cmd_technologies)

    p_stats = sub.add_parser("stats", help="Total companies and technologies")
    p_stats.set_defaults(func=cmd_stats)

    args = parser.parse_args()
    try:
        args.func(args)
    except FetchError as e:
        logging.error(f"Error loading companies data: {e}")
        sys.exit(1)
    except ValidationError as e:
        parser.error(f"invalid query parameters: {e.errors()[0]['msg']}")


if __name__ == "__main__":
    main()
