"""
Value objects for client configuration.

All configs are immutable (frozen dataclasses) so a constructed client can be
shared between threads.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import httpx

TimeoutLike = Union[None, int, float, Tuple[float, float], "TimeoutConfig"]

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Request deadline passed down to the transport.

    The client imposes no timeout of its own: a ``TimeoutConfig`` only
    exists when the caller sets one with ``with_timeout`` or per call.

    Args:
        connect: Connect timeout (seconds)
        read: Read timeout (seconds)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
        >>> TimeoutConfig.coerce(10)
        TimeoutConfig(connect=10, read=10)
    """
    connect: float
    read: float

    def __post_init__(self):
        """Валидация."""
        for name in ("connect", "read"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} timeout must be a number, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} timeout must be positive")

    @classmethod
    def coerce(cls, timeout: TimeoutLike) -> Optional["TimeoutConfig"]:
        """
        Normalize a number, ``(connect, read)`` tuple or ``TimeoutConfig``.

        ``None`` stays ``None`` (no deadline). Invalid values raise
        ``ValueError``.
        """
        if timeout is None or isinstance(timeout, TimeoutConfig):
            return timeout
        if isinstance(timeout, tuple):
            if len(timeout) != 2:
                raise ValueError(f"timeout tuple must be (connect, read), got {timeout!r}")
            return cls(connect=timeout[0], read=timeout[1])
        return cls(connect=timeout, read=timeout)

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

    def as_httpx(self) -> httpx.Timeout:
        """Вернуть как httpx.Timeout (write и pool берут значение read)."""
        return httpx.Timeout(self.read, connect=self.connect)
