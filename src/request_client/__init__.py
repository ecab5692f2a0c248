"""request-client - HTTP client with a fixed base URL and pluggable error checking and decoding."""

import logging

from .version import __version__, DEFAULT_USER_AGENT
from .async_client import AsyncClient
from .core.auth import BasicAuth, NoAuth, TokenAuth
from .core.config import TimeoutConfig
from .core.env_config import ClientSettings, load_options_from_env
from .core.error_checker import accepting_status, default_error_checker
from .core.exceptions import (
    ConfigurationError,
    ConnectionError,
    DecodeError,
    HTTPError,
    ProxyError,
    RequestBuildError,
    RequestClientError,
    TimeoutError,
    TransportError,
)
from .core.http_client import Client, new_client
from .core.logging import LoggingConfig
from .core.options import (
    with_basic_auth,
    with_bearer_token,
    with_content_type,
    with_error_checker,
    with_logging,
    with_timeout,
    with_token,
    with_transport,
    with_unmarshaler,
    with_user_agent,
)
from .core.response import Response
from .core.unmarshal import json_unmarshaler, yaml_unmarshaler

# Silent unless the application configures logging.getLogger('request_client')
logging.getLogger('request_client').addHandler(logging.NullHandler())

__all__ = [
    # Clients
    "Client",
    "AsyncClient",
    "new_client",
    "Response",

    # Options
    "with_transport",
    "with_user_agent",
    "with_content_type",
    "with_basic_auth",
    "with_bearer_token",
    "with_token",
    "with_error_checker",
    "with_unmarshaler",
    "with_timeout",
    "with_logging",

    # Auth modes
    "NoAuth",
    "BasicAuth",
    "TokenAuth",

    # Hooks
    "default_error_checker",
    "accepting_status",
    "json_unmarshaler",
    "yaml_unmarshaler",

    # Config
    "TimeoutConfig",
    "LoggingConfig",
    "ClientSettings",
    "load_options_from_env",

    # Exceptions
    "RequestClientError",
    "ConfigurationError",
    "RequestBuildError",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "ProxyError",
    "HTTPError",
    "DecodeError",

    # Version
    "__version__",
    "DEFAULT_USER_AGENT",
]
