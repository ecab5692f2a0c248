# src/request_client/core/session_manager.py
"""
Thread-local default transport for the sync client.

``requests.Session`` is not guaranteed to be thread-safe, so a client that
owns its transport hands every thread its own session. Sessions supplied by
the caller through ``with_transport`` bypass this manager entirely.
"""
import threading
from typing import Callable, Set
import weakref

import requests


class ThreadSafeSessionManager:
    """
    Manages thread-local requests.Session instances.

    Sessions are created lazily on first access per thread and tracked by
    weak reference so :meth:`close_all` can release them from any thread.
    Each thread-local session is stamped with a generation; ``close_all``
    bumps the generation, so a thread whose session was closed gets a new,
    tracked one on its next access.

    Example:
        >>> manager = ThreadSafeSessionManager(requests.Session)
        >>> session = manager.get_session()  # Gets thread-local session
        >>> manager.close_all()
    """

    def __init__(self, session_factory: Callable[[], requests.Session] = requests.Session):
        self._session_factory = session_factory
        self._local = threading.local()

        self._all_sessions: Set[weakref.ref] = set()
        self._sessions_lock = threading.Lock()
        self._generation = 0

    def get_session(self) -> requests.Session:
        """Get thread-local session, creating it lazily if needed."""
        entry = getattr(self._local, 'entry', None)

        with self._sessions_lock:
            generation = self._generation

        if entry is not None and entry[0] == generation:
            return entry[1]

        session = self._session_factory()
        with self._sessions_lock:
            self._all_sessions.add(weakref.ref(session, self._cleanup_weak_ref))
            # close_all() may have run since the check above
            self._local.entry = (self._generation, session)

        return session

    def _cleanup_weak_ref(self, ref: weakref.ref):
        with self._sessions_lock:
            self._all_sessions.discard(ref)

    def close_all(self):
        """
        Close all sessions from all threads.

        Safe to call multiple times.
        """
        with self._sessions_lock:
            self._generation += 1
            sessions = [ref() for ref in self._all_sessions]
            self._all_sessions.clear()

        for session in sessions:
            if session is not None:
                session.close()

    def get_active_sessions_count(self) -> int:
        """Number of sessions that are still alive across all threads."""
        with self._sessions_lock:
            return sum(1 for ref in self._all_sessions if ref() is not None)
