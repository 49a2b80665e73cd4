# Importing the package registers the built-in sources
from . import github_readme  # noqa: F401
from . import local_file  # noqa: F401
