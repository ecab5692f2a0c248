"""
Authentication modes.

Exactly one mode is active on a client. Each mode is a frozen dataclass that
carries only its own credentials, so a client can never hold basic
credentials while sending a token.

BasicAuth and TokenAuth are also callable as ``requests`` auth hooks, which
keeps ``~/.netrc`` credentials from replacing the client's own. NoAuth is
not a hook: with it the session's own ``auth`` (or netrc) still applies.
"""

import base64
from dataclasses import dataclass
from typing import MutableMapping, Optional, Union


@dataclass(frozen=True)
class NoAuth:
    """No ``Authorization`` header is added (default)."""

    def apply(self, headers: MutableMapping[str, str]) -> None:
        pass


@dataclass(frozen=True)
class BasicAuth:
    """
    HTTP Basic authentication.

    Example:
        >>> headers = {}
        >>> BasicAuth("user", "pass").apply(headers)
        >>> headers["Authorization"]
        'Basic dXNlcjpwYXNz'
    """
    username: str
    password: str

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r}, password='***')"

    def header_value(self) -> str:
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(credentials).decode("ascii")

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = self.header_value()

    def __call__(self, request):
        """requests auth hook: decorate a PreparedRequest."""
        self.apply(request.headers)
        return request


@dataclass(frozen=True)
class TokenAuth:
    """
    Token authentication.

    With the default ``scheme="Bearer"`` the header is ``Bearer <token>``.
    With ``scheme=None`` the token is sent verbatim as the whole
    ``Authorization`` value, so callers include any scheme themselves.

    Example:
        >>> headers = {}
        >>> TokenAuth("abc").apply(headers)
        >>> headers["Authorization"]
        'Bearer abc'
        >>> TokenAuth("Token abc", scheme=None).header_value()
        'Token abc'
    """
    token: str
    scheme: Optional[str] = "Bearer"

    def __repr__(self) -> str:
        return f"TokenAuth(token='***', scheme={self.scheme!r})"

    def header_value(self) -> str:
        if self.scheme:
            return f"{self.scheme} {self.token}"
        return self.token

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = self.header_value()

    def __call__(self, request):
        """requests auth hook: decorate a PreparedRequest."""
        self.apply(request.headers)
        return request


AuthMode = Union[NoAuth, BasicAuth, TokenAuth]
