# Namespace for pipeline steps
from .fetch_document import FetchDocument  # noqa: F401
from .parse_companies import ParseCompanies  # noqa: F401
from .query_companies import QueryCompanies  # noqa: F401
