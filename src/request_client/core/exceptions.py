"""
Иерархия исключений request-client.

Классификация:
- ConfigurationError - неверные опции клиента
- RequestBuildError - запрос не удалось построить (до сетевого I/O)
- TransportError - сетевая ошибка, таймаут, прокси (ответа нет)
- HTTPError - статус вне диапазона [200, 300) (ответ есть)
- DecodeError - тело ответа не разобрано (ответ есть)
"""

from typing import TYPE_CHECKING, Any, Optional

import httpx
import requests

if TYPE_CHECKING:
    from .response import Response

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RequestClientError(Exception):
    """Базовое исключение request-client."""

    def __init__(self, message: str, **kwargs: Any):
        self.message = message
        super().__init__(message)

class ConfigurationError(RequestClientError):
    """Ошибка конфигурации клиента."""
    pass

class RequestBuildError(RequestClientError):
    """
    Запрос не удалось построить.

    Примеры:
    - Невалидный HTTP метод
    - URL без схемы или с неверным хостом
    - Невалидное значение заголовка
    """

    def __init__(self, message: str, method: Optional[str] = None, url: Optional[str] = None):
        self.method = method
        self.url = url
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ТРАНСПОРТНЫЕ ОШИБКИ (ответа нет)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportError(RequestClientError):
    """Ошибка транспорта: запрос ушёл, но ответ не получен."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        full_message = f"{message}"
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message)

class TimeoutError(TransportError):
    """
    Таймаут запроса.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        timeout_type: Тип таймаута ('connect' или 'read')
    """

    def __init__(self, message: str, url: Optional[str] = None, timeout_type: Optional[str] = None):
        self.timeout_type = timeout_type

        msg = message
        if timeout_type:
            msg += f" ({timeout_type} timeout)"

        super().__init__(msg, url)

class ConnectionError(TransportError):
    """
    Ошибка подключения.

    Примеры:
    - Connection refused
    - DNS resolution failed
    - Network unreachable
    """
    pass

class ProxyError(TransportError):
    """Ошибка прокси."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОШИБКИ С ОТВЕТОМ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HTTPError(RequestClientError):
    """
    Ответ со статусом вне диапазона [200, 300).

    Ответ полностью прочитан, поэтому тело доступно через
    ``error.response.body`` / ``error.response.content``.

    Args:
        response: Конверт ответа
    """

    def __init__(self, response: "Response"):
        self.response = response
        self.status_code = response.status_code
        self.url = response.url

        super().__init__(f"http status {self.status_code}")

    @property
    def http_response(self) -> "Response":
        """Alias for :attr:`response`."""
        return self.response

class DecodeError(RequestClientError):
    """
    Тело ответа не удалось разобрать в запрошенный тип.

    Отличается от HTTPError: статус успешный, конверт ответа доступен
    через ``error.response``, причина в ``__cause__``.
    """

    def __init__(self, response: "Response", reason: str = ""):
        self.response = response
        self.status_code = response.status_code

        msg = "failed decoding response body"
        if reason:
            msg += f": {reason}"

        super().__init__(msg)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def classify_requests_exception(exc: Exception, url: str) -> RequestClientError:
    """
    Конвертировать requests.exceptions в наши исключения.

    Args:
        exc: Исключение из requests
        url: URL запроса

    Returns:
        Наше исключение с правильной классификацией

    Examples:
        >>> exc = requests.exceptions.ConnectTimeout()
        >>> our_exc = classify_requests_exception(exc, "https://example.com")
        >>> assert isinstance(our_exc, TimeoutError)
    """

    if isinstance(exc, requests.exceptions.ConnectTimeout):
        return TimeoutError("Request timeout", url, timeout_type="connect")

    elif isinstance(exc, requests.exceptions.Timeout):
        return TimeoutError("Request timeout", url, timeout_type="read")

    elif isinstance(exc, requests.exceptions.ProxyError):
        return ProxyError("Proxy error", url)

    elif isinstance(exc, requests.exceptions.ConnectionError):
        return ConnectionError("Connection error", url)

    else:
        return TransportError(f"Request failed: {exc}", url)

def classify_httpx_exception(exc: Exception, url: str) -> RequestClientError:
    """
    Конвертировать httpx исключения в наши исключения.

    Args:
        exc: Исключение из httpx
        url: URL запроса

    Returns:
        Наше исключение с правильной классификацией
    """

    if isinstance(exc, httpx.ConnectTimeout):
        return TimeoutError("Request timeout", url, timeout_type="connect")

    elif isinstance(exc, httpx.TimeoutException):
        return TimeoutError("Request timeout", url, timeout_type="read")

    elif isinstance(exc, httpx.ProxyError):
        return ProxyError("Proxy error", url)

    elif isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
        return ConnectionError("Connection error", url)

    else:
        return TransportError(f"Request failed: {exc}", url)
