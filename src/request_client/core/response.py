"""
Response envelope with a replayable body.

The transport response is read fully into memory and closed before the
envelope is built. Every access to :attr:`Response.body` returns a new
reader over the same buffer, so the error checker, the unmarshaler and the
caller can each consume the body independently.
"""

import io
import json
from typing import Any, Mapping, Optional


class Response:
    """
    Buffered HTTP response.

    Works for both ``requests.Response`` (sync client) and ``httpx.Response``
    (async client); the original object stays available as :attr:`raw`.

    Attributes:
        data: Decoded body when an output type was requested and decoding
              succeeded, otherwise ``None``.

    Example:
        >>> response = client.get("/users/1", out=dict)
        >>> response.status_code
        200
        >>> response.body.read() == response.body.read()
        True
        >>> response.data["id"]
        1
    """

    def __init__(self, raw: Any, content: bytes):
        self._raw = raw
        self._content = content
        self.data: Any = None

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"

    @property
    def raw(self) -> Any:
        """Transport response object (already read and closed)."""
        return self._raw

    @property
    def status_code(self) -> int:
        return self._raw.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        """Case-insensitive response headers."""
        return self._raw.headers

    @property
    def url(self) -> str:
        return str(self._raw.url)

    @property
    def reason(self) -> Optional[str]:
        # requests: .reason, httpx: .reason_phrase
        reason = getattr(self._raw, "reason", None)
        if reason is None:
            reason = getattr(self._raw, "reason_phrase", None)
        return reason

    @property
    def request(self) -> Any:
        """Transport request that produced this response."""
        return self._raw.request

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content(self) -> bytes:
        """Full body as bytes."""
        return self._content

    @property
    def body(self) -> io.BytesIO:
        """Fresh readable stream over the buffered body."""
        return io.BytesIO(self._content)

    @property
    def text(self) -> str:
        return self._raw.text

    def json(self, **kwargs: Any) -> Any:
        """Parse the body as JSON (no type validation)."""
        return json.loads(self._content, **kwargs)
