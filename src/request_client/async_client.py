# src/request_client/async_client.py
"""
Асинхронный клиент на базе httpx.

Тот же конвейер, что у синхронного ``Client``, для asyncio приложений
(FastAPI, aiohttp, etc.). Отмена задачи asyncio прерывает запрос в
транспорте и пробрасывается как ``asyncio.CancelledError``.
"""

import time
from typing import Any, Mapping, Optional

import httpx

from .core.base import BaseClient
from .core.config import TimeoutLike
from .core.exceptions import (
    ConfigurationError,
    RequestBuildError,
    classify_httpx_exception,
)
from .core.response import Response
from .core.utils import QueryValue, append_query


class AsyncClient(BaseClient):
    """
    Асинхронный HTTP клиент с фиксированным base URL.

    Example:
        >>> async with AsyncClient("https://api.example.com") as client:
        ...     response = await client.get("/users/1", out=dict)
        ...     print(response.data)

        >>> # Или без context manager
        >>> client = AsyncClient("https://api.example.com")
        >>> response = await client.post("/users", body=b'{"name": "John"}')
        >>> await client.close()
    """

    def _init_transport(self) -> None:
        if self._transport is None:
            self._transport = httpx.AsyncClient(follow_redirects=True)
        elif not isinstance(self._transport, httpx.AsyncClient):
            raise ConfigurationError(
                f"AsyncClient transport must be an httpx.AsyncClient, got {type(self._transport).__name__}"
            )

    async def __aenter__(self) -> "AsyncClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Закрыть собственный httpx клиент (переданный через with_transport не трогаем)."""
        if self._owns_transport:
            await self._transport.aclose()

    @property
    def transport(self) -> httpx.AsyncClient:
        return self._transport

    def _encode_async_body(self, body: Any) -> Any:
        """
        httpx.AsyncClient принимает только bytes или async итератор.

        Синхронные файлы и итераторы bytes читаются в память заранее.
        """
        if hasattr(body, "read"):
            body = body.read()
        elif body is not None and not isinstance(body, (str, bytes, bytearray)) \
                and not hasattr(body, "__aiter__"):
            body = b"".join(self._encode_body(chunk) for chunk in body)
        return self._encode_body(body)

    # ==================== Конвейер ====================

    async def request(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        """
        Выполнить HTTP запрос.

        Args:
            method: HTTP метод (GET, POST, etc.)
            path: Путь относительно base URL
            headers: Заголовки запроса
            body: Тело запроса: bytes, str (UTF-8), файл, итератор или async итератор bytes
            out: Тип для декодирования тела, результат в ``response.data``
            timeout: Дедлайн для этого вызова

        Returns:
            Response с прочитанным телом

        Raises:
            RequestBuildError: Невалидный метод или URL
            TransportError: Сеть, таймаут, прокси
            HTTPError: Статус вне [200, 300)
            DecodeError: Тело не разобрано в ``out``
        """
        url, request_headers = self._prepare(method, path, headers)
        deadline = self._resolve_timeout(timeout)

        try:
            request = self._transport.build_request(
                method,
                url,
                headers=dict(request_headers),
                content=self._encode_async_body(body),
                timeout=deadline.as_httpx() if deadline else httpx.USE_CLIENT_DEFAULT,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestBuildError(f"invalid request: {e}", method=method, url=url) from e

        if request.url.scheme not in ("http", "https"):
            raise RequestBuildError(
                f"unsupported URL scheme {request.url.scheme!r}", method=method, url=url
            )

        self._log_started(method, url, request.headers)
        start_time = time.time()

        try:
            raw = await self._transport.send(request)
        except httpx.RequestError as e:
            error = classify_httpx_exception(e, url)
            self._log_failed(method, url, error, round((time.time() - start_time) * 1000, 2))
            raise error from e

        try:
            content = raw.content
        finally:
            await raw.aclose()

        response = Response(raw, content)
        self._log_completed(method, url, response, round((time.time() - start_time) * 1000, 2))

        return self._finalize(request, response, out)

    async def get(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, QueryValue]] = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        """Выполнить GET запрос (без тела); ``query`` кодируется в URL."""
        return await self.request("GET", append_query(path, query), headers, None, out, timeout=timeout)

    async def post(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        return await self.request("POST", path, headers, body, out, timeout=timeout)

    async def put(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        return await self.request("PUT", path, headers, body, out, timeout=timeout)

    async def patch(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        return await self.request("PATCH", path, headers, body, out, timeout=timeout)

    async def delete(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        return await self.request("DELETE", path, headers, body, out, timeout=timeout)
