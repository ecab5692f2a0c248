"""
Error checkers: classify a completed response as success or error.

An error checker is any callable ``(request, response) -> Exception | None``.
``request`` is the transport request (``requests.PreparedRequest`` or
``httpx.Request``), ``response`` is the buffered :class:`Response`. The body
is a replayable buffer, so checkers may read it.
"""

from typing import Any, Callable, Optional

from .exceptions import HTTPError
from .response import Response

ErrorChecker = Callable[[Any, Response], Optional[Exception]]


def default_error_checker(request: Any, response: Response) -> Optional[Exception]:
    """Return :class:`HTTPError` for any status outside [200, 300)."""
    if response.status_code < 200 or response.status_code >= 300:
        return HTTPError(response)

    return None


def accepting_status(*status_codes: int, base: ErrorChecker = default_error_checker) -> ErrorChecker:
    """
    Build a checker that also treats ``status_codes`` as success.

    Args:
        *status_codes: Extra status codes to accept (e.g. 404 for "maybe" lookups)
        base: Checker consulted for every other status

    Example:
        >>> client = Client(
        ...     "https://api.example.com",
        ...     with_error_checker(accepting_status(404, 409)),
        ... )
    """
    accepted = frozenset(status_codes)

    def checker(request: Any, response: Response) -> Optional[Exception]:
        if response.status_code in accepted:
            return None
        return base(request, response)

    return checker
