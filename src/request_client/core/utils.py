"""
Utility functions for the request pipeline.

Includes:
- Base URL / path normalization
- Query string encoding for GET
- URL and header sanitization for safe logging
"""

import re
from typing import Iterable, Mapping, Optional, Set, Union
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse

QueryValue = Union[str, int, float, Iterable[Union[str, int, float]]]

# RFC 7230 token: methods such as "GET" or "PROPFIND", never "" or "GET /x"
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def normalize_base_url(base_url: str) -> str:
    """
    Strip trailing slashes from the base URL.

    Examples:
        >>> normalize_base_url("http://h/")
        'http://h'
    """
    return base_url.rstrip("/")


def normalize_path(path: str) -> str:
    """
    Make sure the path starts with ``/``.

    Examples:
        >>> normalize_path("users")
        '/users'
        >>> normalize_path("/users")
        '/users'
    """
    if not path.startswith("/"):
        return f"/{path}"
    return path


def build_url(base_url: str, path: str) -> str:
    """Join a normalized base URL and a path."""
    return base_url + normalize_path(path)


def is_valid_method(method: str) -> bool:
    """Check that ``method`` is a syntactically valid HTTP method token."""
    return bool(method) and _METHOD_TOKEN.fullmatch(method) is not None


def encode_query(query: Mapping[str, QueryValue]) -> str:
    """
    URL-encode a query mapping, sorted by key.

    Sequence values produce repeated keys. Spaces are encoded as ``+``.

    Examples:
        >>> encode_query({"b": "x y", "a": "1"})
        'a=1&b=x+y'
        >>> encode_query({"id": [1, 2]})
        'id=1&id=2'
    """
    pairs = []
    for key in sorted(query):
        value = query[key]
        if isinstance(value, (str, bytes, int, float)):
            pairs.append((key, value))
        else:
            pairs.extend((key, item) for item in value)
    return urlencode(pairs)


def append_query(path: str, query: Optional[Mapping[str, QueryValue]]) -> str:
    """
    Append an encoded query to the path.

    A path that already carries a query string is extended with ``&``.
    """
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{encode_query(query)}"


# Default sensitive parameter names that should be masked in logs
DEFAULT_SENSITIVE_PARAMS = {
    'api_key',
    'apikey',
    'api-key',
    'token',
    'access_token',
    'refresh_token',
    'key',
    'secret',
    'password',
    'auth',
    'client_secret',
    'session_id',
}

SENSITIVE_HEADERS = {
    'authorization',
    'proxy-authorization',
    'x-api-key',
    'x-auth-token',
    'cookie',
    'set-cookie',
}


def sanitize_url(
    url: str,
    extra_params: Optional[Set[str]] = None,
    mask: str = 'REDACTED'
) -> str:
    """
    Mask sensitive query parameters in URL for safe logging.

    Args:
        url: The URL to sanitize
        extra_params: Additional parameter names to mask (case-insensitive)
        mask: The string to use for masking (default: 'REDACTED')

    Returns:
        Sanitized URL with sensitive parameters masked

    Examples:
        >>> sanitize_url('https://api.example.com/data?api_key=secret123')
        'https://api.example.com/data?api_key=REDACTED'
    """
    if not url:
        return url

    sensitive_params = DEFAULT_SENSITIVE_PARAMS | (
        {p.lower() for p in extra_params} if extra_params else set()
    )

    try:
        parsed = urlparse(url)
    except ValueError:
        # Don't risk exposing the original URL
        return '<URL sanitization failed>'

    if not parsed.query:
        return url

    params = parse_qs(parsed.query, keep_blank_values=True)
    sanitized_params = {
        name: [mask] * len(values) if name.lower() in sensitive_params else values
        for name, values in params.items()
    }

    return urlunparse(parsed._replace(query=urlencode(sanitized_params, doseq=True)))


def sanitize_headers(headers: Optional[Mapping[str, str]], mask: str = 'REDACTED') -> dict:
    """
    Mask sensitive headers for safe logging.

    Examples:
        >>> sanitize_headers({'Authorization': 'Bearer token123'})
        {'Authorization': 'REDACTED'}
    """
    if not headers:
        return {}

    return {
        key: mask if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }
