"""Core request-client modules."""

from .auth import AuthMode, BasicAuth, NoAuth, TokenAuth
from .base import BaseClient
from .config import TimeoutConfig
from .error_checker import ErrorChecker, accepting_status, default_error_checker
from .exceptions import (
    ConfigurationError,
    ConnectionError,
    DecodeError,
    HTTPError,
    ProxyError,
    RequestBuildError,
    RequestClientError,
    TimeoutError,
    TransportError,
    classify_httpx_exception,
    classify_requests_exception,
)
from .http_client import Client, new_client
from .options import (
    Option,
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
from .response import Response
from .unmarshal import Unmarshaler, json_unmarshaler, yaml_unmarshaler

__all__ = [
    # Clients
    "BaseClient",
    "Client",
    "new_client",
    "Response",
    # Options
    "Option",
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
    # Auth
    "AuthMode",
    "NoAuth",
    "BasicAuth",
    "TokenAuth",
    # Hooks
    "ErrorChecker",
    "default_error_checker",
    "accepting_status",
    "Unmarshaler",
    "json_unmarshaler",
    "yaml_unmarshaler",
    # Config
    "TimeoutConfig",
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
    "classify_requests_exception",
    "classify_httpx_exception",
]
