"""Package version, read from installed metadata (single source of truth in pyproject.toml)."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("request-client")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

DEFAULT_USER_AGENT = f"request-client/{__version__}"
