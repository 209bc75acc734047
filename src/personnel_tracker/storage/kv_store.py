from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import ContextManager, Iterator, Optional, Protocol, Sequence


class StoreLockTimeout(RuntimeError):
    """Raised when a named store lock cannot be acquired in time."""


class KeyValueStore(Protocol):
    """Durable string-keyed store holding opaque serialized values.

    Repositories depend on this interface, never on a concrete backend.
    ``locked(name)`` serializes read-modify-write sequences between callers
    sharing the store; distinct names never block each other.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def keys(self) -> Sequence[str]:
        raise NotImplementedError

    def locked(self, name: str) -> ContextManager[None]:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store; used by tests and the ``memory`` backend."""

    def __init__(self, initial: Optional[dict[str, str]] = None, *, lock_timeout: float = 10.0):
        self._data: dict[str, str] = dict(initial or {})
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self._lock_timeout = lock_timeout

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> Sequence[str]:
        return list(self._data)

    @contextmanager
    def locked(self, name: str) -> Iterator[None]:
        with self._locks_guard:
            lock = self._locks.setdefault(name, threading.Lock())
        if not lock.acquire(timeout=self._lock_timeout):
            raise StoreLockTimeout(f"Timed out waiting for lock {name!r}")
        try:
            yield
        finally:
            lock.release()
