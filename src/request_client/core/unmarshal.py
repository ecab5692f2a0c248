"""
Unmarshalers: decode a buffered response body into a requested type.

An unmarshaler is any callable ``(content, out) -> value`` where ``out`` is
the output type passed to ``Client.request(..., out=...)``. Any exception it
raises is reported as :class:`DecodeError` by the client.

Output types are validated with ``pydantic.TypeAdapter``, so ``dict``,
``list[int]``, dataclasses, ``TypedDict`` and ``BaseModel`` subclasses all
work as targets.
"""

from functools import lru_cache
from typing import Any, Callable

import yaml
from pydantic import TypeAdapter

Unmarshaler = Callable[[bytes, Any], Any]


@lru_cache(maxsize=256)
def _adapter(out: Any) -> TypeAdapter:
    return TypeAdapter(out)


def _type_adapter(out: Any) -> TypeAdapter:
    try:
        hash(out)
    except TypeError:
        # unhashable typing constructs
        return TypeAdapter(out)
    return _adapter(out)


def json_unmarshaler(content: bytes, out: Any) -> Any:
    """
    Parse JSON and validate it into ``out`` (default unmarshaler).

    Example:
        >>> json_unmarshaler(b'{"id": 1}', dict)
        {'id': 1}
    """
    return _type_adapter(out).validate_json(content)


def yaml_unmarshaler(content: bytes, out: Any) -> Any:
    """
    Parse YAML (safe loader) and validate it into ``out``.

    Example:
        >>> client = Client(base_url, with_unmarshaler(yaml_unmarshaler))
    """
    return _type_adapter(out).validate_python(yaml.safe_load(content))
