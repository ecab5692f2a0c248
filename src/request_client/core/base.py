# src/request_client/core/base.py
"""
Request pipeline shared by the sync and async clients.

Transport-independent steps live here: option application, URL and header
construction, auth decoration, error checking and decoding. ``Client`` and
``AsyncClient`` only build, send and read the transport request.
"""

import logging
from typing import Any, Mapping, Optional, Tuple

from pydantic import PydanticUserError
from requests.structures import CaseInsensitiveDict

from ..version import DEFAULT_USER_AGENT
from .auth import AuthMode, NoAuth
from .config import TimeoutConfig, TimeoutLike
from .error_checker import ErrorChecker, default_error_checker
from .exceptions import DecodeError, RequestBuildError
from .logging import LoggingConfig, configure_logger, logger_name_for
from .options import Option
from .response import Response
from .unmarshal import Unmarshaler, json_unmarshaler
from .utils import build_url, is_valid_method, normalize_base_url, sanitize_headers, sanitize_url

DEFAULT_CONTENT_TYPE = "application/json"


class BaseClient:
    """
    Common state and pipeline steps of a request client.

    The client is immutable after construction: options run inside
    ``__init__`` and any later attribute assignment raises ``RuntimeError``.
    """

    def __init__(self, base_url: str, *options: Option):
        """
        Args:
            base_url: Base URL; trailing slashes are stripped
            *options: Option functions, applied in order (last wins)
        """
        self._base_url = normalize_base_url(base_url)
        self._transport: Any = None
        self._user_agent: Optional[str] = DEFAULT_USER_AGENT
        self._content_type: Optional[str] = DEFAULT_CONTENT_TYPE
        self._auth: AuthMode = NoAuth()
        self._error_checker: Optional[ErrorChecker] = None
        self._unmarshaler: Optional[Unmarshaler] = None
        self._timeout: Optional[TimeoutConfig] = None
        self._logging_config: Optional[LoggingConfig] = None

        for option in options:
            option(self)

        if self._error_checker is None:
            self._error_checker = default_error_checker
        if self._unmarshaler is None:
            self._unmarshaler = json_unmarshaler

        self._owns_transport = self._transport is None
        self._init_transport()

        logger_name = logger_name_for(self._base_url)
        if self._logging_config is not None:
            self._logger = configure_logger(self._logging_config, logger_name)
        else:
            self._logger = logging.getLogger(logger_name)

        self._initialized = True

    def __setattr__(self, name, value):
        """Запретить изменение после init (immutability)."""
        if getattr(self, '_initialized', False):
            raise RuntimeError(
                f"Cannot modify '{name}' - {type(self).__name__} is immutable. "
                f"Create new instance instead."
            )
        object.__setattr__(self, name, value)

    def _init_transport(self) -> None:
        """Create the default transport or validate a caller-supplied one."""
        raise NotImplementedError

    @classmethod
    def from_env(cls, *options: Option, env_file: Optional[str] = None, **overrides: Any):
        """
        Build a client from ``REQUEST_CLIENT_*`` environment variables.

        Options passed here are applied after the environment ones, so they
        win on conflicts.

        Example:
            >>> # REQUEST_CLIENT_BASE_URL=https://api.example.com
            >>> # REQUEST_CLIENT_BEARER_TOKEN=secret
            >>> client = Client.from_env(with_timeout(10))
        """
        from .env_config import load_options_from_env

        base_url, env_options = load_options_from_env(env_file=env_file, **overrides)
        return cls(base_url, *env_options, *options)

    # ==================== Pipeline steps ====================

    def _prepare(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]],
    ) -> Tuple[str, CaseInsensitiveDict]:
        """Validate method, build full URL and decorated headers."""
        url = build_url(self._base_url, path)
        if not is_valid_method(method):
            raise RequestBuildError(f"invalid method {method!r}", method=method, url=url)

        return url, self._build_headers(headers)

    def _build_headers(self, headers: Optional[Mapping[str, str]]) -> CaseInsensitiveDict:
        """
        Caller headers first, client defaults fill the gaps, auth last.

        The caller's mapping is copied, never mutated.
        """
        merged = CaseInsensitiveDict(headers or {})

        if self._user_agent:
            merged.setdefault("User-Agent", self._user_agent)
        if self._content_type:
            merged.setdefault("Content-Type", self._content_type)

        self._auth.apply(merged)
        return merged

    @staticmethod
    def _encode_body(body: Any) -> Any:
        if isinstance(body, str):
            return body.encode("utf-8")
        return body

    def _resolve_timeout(self, timeout: TimeoutLike) -> Optional[TimeoutConfig]:
        if timeout is None:
            return self._timeout
        try:
            return TimeoutConfig.coerce(timeout)
        except ValueError as e:
            raise RequestBuildError(str(e)) from e

    def _finalize(self, request: Any, response: Response, out: Any) -> Response:
        """Run the error checker, then decode into ``out`` when requested."""
        error = self._error_checker(request, response)
        if error is not None:
            if getattr(error, "response", None) is None:
                error.response = response
            raise error

        if out is not None:
            try:
                response.data = self._unmarshaler(response.content, out)
            except PydanticUserError:
                # ``out`` itself is unusable (no schema), not the body
                raise
            except Exception as e:
                raise DecodeError(response, str(e)) from e

        return response

    # ==================== Logging ====================

    def _log_started(self, method: str, url: str, headers: Mapping[str, str]) -> None:
        self._logger.debug(
            "Request started",
            extra={
                "method": method,
                "url": sanitize_url(url),
                "headers": sanitize_headers(headers),
            },
        )

    def _log_completed(self, method: str, url: str, response: Response, duration_ms: float) -> None:
        self._logger.debug(
            "Request completed",
            extra={
                "method": method,
                "url": sanitize_url(url),
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "response_size": len(response.content),
            },
        )

    def _log_failed(self, method: str, url: str, error: Exception, duration_ms: float) -> None:
        self._logger.debug(
            "Request failed",
            extra={
                "method": method,
                "url": sanitize_url(url),
                "error": str(error),
                "error_type": type(error).__name__,
                "duration_ms": duration_ms,
            },
        )

    # ==================== Свойства ====================

    @property
    def base_url(self) -> str:
        """Base URL without trailing slash (read-only)."""
        return self._base_url

    @property
    def user_agent(self) -> Optional[str]:
        return self._user_agent

    @property
    def content_type(self) -> Optional[str]:
        return self._content_type

    @property
    def auth(self) -> AuthMode:
        """Active authentication mode."""
        return self._auth

    @property
    def timeout(self) -> Optional[TimeoutConfig]:
        """Default deadline, ``None`` when the client imposes none."""
        return self._timeout

    @property
    def owns_transport(self) -> bool:
        """True when the client created its transport and closes it."""
        return self._owns_transport
