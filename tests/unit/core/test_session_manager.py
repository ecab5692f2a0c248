"""
Tests for thread-local session management and concurrent client use.
"""

import threading
from typing import List
from unittest import mock

import requests
import responses

from request_client import Client
from request_client.core.session_manager import ThreadSafeSessionManager


class TestThreadSafeSessionManager:

    def test_same_thread_same_session(self):
        manager = ThreadSafeSessionManager()

        assert manager.get_session() is manager.get_session()
        assert manager.get_active_sessions_count() == 1

        manager.close_all()

    def test_each_thread_gets_own_session(self):
        manager = ThreadSafeSessionManager()
        sessions: List[requests.Session] = []
        lock = threading.Lock()

        def worker():
            session = manager.get_session()
            with lock:
                sessions.append(session)

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(s) for s in sessions}) == 5
        manager.close_all()

    def test_close_all(self):
        manager = ThreadSafeSessionManager()
        first = manager.get_session()

        manager.close_all()
        manager.close_all()

        assert manager.get_active_sessions_count() == 0
        assert manager.get_session() is not first
        manager.close_all()

    def test_close_all_replaces_sessions_in_other_threads(self):
        manager = ThreadSafeSessionManager()
        seen: List[requests.Session] = []
        first_done = threading.Event()
        closed = threading.Event()

        def worker():
            seen.append(manager.get_session())
            first_done.set()
            closed.wait(timeout=5)
            seen.append(manager.get_session())

        thread = threading.Thread(target=worker)
        thread.start()
        first_done.wait(timeout=5)

        with mock.patch.object(seen[0], "close", wraps=seen[0].close) as close:
            manager.close_all()
            close.assert_called_once()

        closed.set()
        thread.join()

        assert seen[1] is not seen[0]
        assert manager.get_active_sessions_count() == 1

        with mock.patch.object(seen[1], "close", wraps=seen[1].close) as close:
            manager.close_all()
            close.assert_called_once()

    def test_custom_factory(self):
        created = []

        def factory():
            session = requests.Session()
            created.append(session)
            return session

        manager = ThreadSafeSessionManager(factory)
        session = manager.get_session()

        assert created == [session]
        manager.close_all()


class TestConcurrentClient:
    """One client shared across threads."""

    @responses.activate
    def test_concurrent_requests(self, base_url):
        for i in range(20):
            responses.add(responses.GET, f"{base_url}/data/{i}", json={"id": i}, status=200)

        client = Client(base_url)
        results = []
        errors = []
        lock = threading.Lock()

        def worker(thread_id: int):
            try:
                for i in range(5):
                    response = client.get(f"/data/{thread_id * 5 + i}", out=dict)
                    with lock:
                        results.append(response.data["id"])
            except Exception as e:
                with lock:
                    errors.append(e)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        client.close()

        assert errors == []
        assert sorted(results) == list(range(20))
