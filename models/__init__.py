from .company_record import CompanyLink, CompanyRecord
from .query import QueryParams, QueryResult

__all__ = [
    "CompanyLink",
    "CompanyRecord",
    "QueryParams",
    "QueryResult",
]
