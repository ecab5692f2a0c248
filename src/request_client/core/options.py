"""
Client options.

An option is a callable applied to the client once, during construction,
before the client is frozen. Options are applied left to right, so the last
one wins when two options touch the same concern (e.g. two auth modes).

Example:
    >>> client = Client(
    ...     "https://api.example.com",
    ...     with_user_agent("my-service/1.2"),
    ...     with_bearer_token("secret"),
    ...     with_timeout((3, 30)),
    ... )
"""

from typing import TYPE_CHECKING, Any, Callable, Optional

from .auth import BasicAuth, TokenAuth
from .config import TimeoutConfig, TimeoutLike
from .error_checker import ErrorChecker
from .exceptions import ConfigurationError
from .logging import LoggingConfig
from .unmarshal import Unmarshaler

if TYPE_CHECKING:
    from .base import BaseClient

Option = Callable[["BaseClient"], None]


def with_transport(transport: Any) -> Option:
    """
    Use a caller-owned transport.

    ``Client`` expects a ``requests.Session``, ``AsyncClient`` an
    ``httpx.AsyncClient``. The client never closes a transport it was given.
    """
    def option(client: "BaseClient") -> None:
        client._transport = transport
    return option


def with_user_agent(user_agent: str) -> Option:
    """Set the ``User-Agent`` sent with every request."""
    def option(client: "BaseClient") -> None:
        client._user_agent = user_agent
    return option


def with_content_type(content_type: Optional[str]) -> Option:
    """Set the ``Content-Type`` sent with every request; ``None`` disables it."""
    def option(client: "BaseClient") -> None:
        client._content_type = content_type
    return option


def with_basic_auth(username: str, password: str) -> Option:
    """Use HTTP Basic authentication (replaces any token auth)."""
    def option(client: "BaseClient") -> None:
        client._auth = BasicAuth(username, password)
    return option


def with_bearer_token(token: str) -> Option:
    """Send ``Authorization: Bearer <token>`` (replaces any basic auth)."""
    def option(client: "BaseClient") -> None:
        client._auth = TokenAuth(token)
    return option


def with_token(credential: str) -> Option:
    """
    Send ``credential`` verbatim as the ``Authorization`` value.

    The caller includes the scheme, e.g. ``with_token("Token abc")``.
    Replaces any basic auth.
    """
    def option(client: "BaseClient") -> None:
        client._auth = TokenAuth(credential, scheme=None)
    return option


def with_error_checker(error_checker: Optional[ErrorChecker]) -> Option:
    """Replace the error checker; ``None`` restores the default."""
    def option(client: "BaseClient") -> None:
        if error_checker is not None and not callable(error_checker):
            raise ConfigurationError("error checker must be callable")
        client._error_checker = error_checker
    return option


def with_unmarshaler(unmarshaler: Optional[Unmarshaler]) -> Option:
    """Replace the response unmarshaler; ``None`` restores the default (JSON)."""
    def option(client: "BaseClient") -> None:
        if unmarshaler is not None and not callable(unmarshaler):
            raise ConfigurationError("unmarshaler must be callable")
        client._unmarshaler = unmarshaler
    return option


def with_timeout(timeout: TimeoutLike) -> Option:
    """
    Default request deadline: seconds, ``(connect, read)`` or TimeoutConfig.

    A ``timeout`` passed to a single call takes precedence.
    """
    def option(client: "BaseClient") -> None:
        try:
            client._timeout = TimeoutConfig.coerce(timeout)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
    return option


def with_logging(config: LoggingConfig) -> Option:
    """Configure a handler on this client's per-host logger."""
    def option(client: "BaseClient") -> None:
        client._logging_config = config
    return option
