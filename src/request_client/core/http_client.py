# src/request_client/core/http_client.py
from typing import Any, Mapping, Optional
import time

import requests

from .auth import NoAuth
from .base import BaseClient
from .config import TimeoutLike
from .exceptions import (
    ConfigurationError,
    RequestBuildError,
    classify_requests_exception,
)
from .options import Option
from .response import Response
from .session_manager import ThreadSafeSessionManager
from .utils import QueryValue, append_query


class Client(BaseClient):
    """
    Синхронный HTTP клиент с фиксированным base URL.

    Каждый вызов проходит один конвейер: построение запроса, заголовки
    и аутентификация, отправка через requests, буферизация тела, проверка
    статуса (error checker) и, при запросе ``out``, декодирование.

    Features:
        - Опции конфигурации (``with_*``), последняя опция побеждает
        - Тело ответа читается повторно (``response.body``)
        - Immutable после создания, thread-safe
        - Контекстный менеджер для освобождения собственного транспорта

    Example:
        >>> with Client("https://api.example.com", with_bearer_token("t")) as client:
        ...     response = client.get("/users", query={"page": "2"}, out=list)
        ...     users = response.data
    """

    def __init__(self, base_url: str, *options: Option):
        """
        Args:
            base_url: Базовый URL (завершающий слеш удаляется)
            *options: Опции конфигурации (``with_transport``, ``with_user_agent`` ...)
        """
        super().__init__(base_url, *options)

    def _init_transport(self) -> None:
        if self._transport is None:
            # Thread-safe: каждый поток получает собственную сессию
            self._session_manager = ThreadSafeSessionManager(requests.Session)
        elif isinstance(self._transport, requests.Session):
            self._session_manager = None
        else:
            raise ConfigurationError(
                f"Client transport must be a requests.Session, got {type(self._transport).__name__}"
            )

    def __enter__(self):
        """Поддержка контекстного менеджера"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Закрытие собственного транспорта при выходе из контекста"""
        self.close()
        return False

    def close(self):
        """
        Закрывает сессии, созданные клиентом (из всех потоков).

        Сессия, переданная через ``with_transport``, не закрывается:
        ее жизненным циклом управляет вызывающий код.
        """
        if self._session_manager is not None:
            self._session_manager.close_all()

    @property
    def session(self) -> requests.Session:
        """Сессия для текущего потока (или переданная через with_transport)."""
        if self._session_manager is None:
            return self._transport
        return self._session_manager.get_session()

    # ==================== Конвейер ====================

    def request(
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
        Выполняет HTTP запрос.

        Args:
            method: HTTP метод
            path: Путь относительно base URL (``/`` добавляется при отсутствии)
            headers: Заголовки запроса (имеют приоритет над User-Agent/Content-Type клиента)
            body: Тело запроса: bytes, str (UTF-8), файл или итератор bytes
            out: Тип для декодирования тела (dict, list, dataclass, BaseModel ...);
                 результат в ``response.data``
            timeout: Дедлайн для этого вызова (секунды, (connect, read) или TimeoutConfig)

        Returns:
            Response с прочитанным телом

        Raises:
            RequestBuildError: Невалидный метод или URL (до сетевого I/O)
            TransportError: Сеть, таймаут, прокси (ответа нет)
            HTTPError: Статус вне [200, 300) (или ошибка из custom error checker)
            DecodeError: Тело не разобрано в ``out``
        """
        url, request_headers = self._prepare(method, path, headers)
        deadline = self._resolve_timeout(timeout)
        session = self.session

        try:
            prepared = session.prepare_request(
                requests.Request(
                    method,
                    url,
                    headers=request_headers,
                    data=self._encode_body(body),
                    auth=None if isinstance(self._auth, NoAuth) else self._auth,
                )
            )
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RequestBuildError(f"invalid request: {e}", method=method, url=url) from e

        settings = session.merge_environment_settings(prepared.url, {}, None, None, None)

        self._log_started(method, url, prepared.headers)
        start_time = time.time()

        try:
            raw = session.send(
                prepared,
                timeout=deadline.as_tuple() if deadline else None,
                **settings
            )
        except requests.exceptions.RequestException as e:
            error = classify_requests_exception(e, url)
            self._log_failed(method, url, error, round((time.time() - start_time) * 1000, 2))
            raise error from e

        try:
            content = raw.content
        finally:
            raw.close()

        response = Response(raw, content)
        self._log_completed(method, url, response, round((time.time() - start_time) * 1000, 2))

        return self._finalize(prepared, response, out)

    def get(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, QueryValue]] = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        """
        Выполняет GET запрос (без тела).

        Args:
            path: Путь
            headers: Заголовки
            query: Параметры запроса, кодируются и добавляются после ``?``
            out: Тип для декодирования тела
            timeout: Дедлайн для этого вызова
        """
        return self.request("GET", append_query(path, query), headers, None, out, timeout=timeout)

    def post(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        """Выполняет POST запрос."""
        return self.request("POST", path, headers, body, out, timeout=timeout)

    def put(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        """Выполняет PUT запрос."""
        return self.request("PUT", path, headers, body, out, timeout=timeout)

    def patch(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        """Выполняет PATCH запрос."""
        return self.request("PATCH", path, headers, body, out, timeout=timeout)

    def delete(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        out: Any = None,
        *,
        timeout: TimeoutLike = None,
    ) -> Response:
        """Выполняет DELETE запрос."""
        return self.request("DELETE", path, headers, body, out, timeout=timeout)


def new_client(base_url: str, *options: Option) -> Client:
    """Create a sync :class:`Client` (functional constructor)."""
    return Client(base_url, *options)
