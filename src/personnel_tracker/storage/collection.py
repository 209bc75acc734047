from __future__ import annotations

import json
from typing import Callable, Generic, Optional, TypeVar

from .kv_store import KeyValueStore

T = TypeVar("T")


class JsonCollection(Generic[T]):
    """A list of entities serialized as one JSON array under a single key.

    Every call reads the whole collection from the store and every write
    stores the whole collection back; nothing is cached between calls.
    Mutations hold the store lock named after the key for the whole
    read-modify-write.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        *,
        encode: Callable[[T], dict],
        decode: Callable[[dict], T],
    ):
        self._store = store
        self._key = key
        self._encode = encode
        self._decode = decode

    @property
    def key(self) -> str:
        return self._key

    def exists(self) -> bool:
        return self._store.get(self._key) is not None

    def load(self) -> list[T]:
        raw = self._store.get(self._key)
        if not raw:
            return []
        return [self._decode(item) for item in json.loads(raw)]

    def save(self, items: list[T]) -> None:
        payload = [self._encode(item) for item in items]
        self._store.set(self._key, json.dumps(payload, ensure_ascii=False))

    def append(self, item: T) -> T:
        with self._store.locked(self._key):
            items = self.load()
            items.append(item)
            self.save(items)
        return item

    def save_if_missing(self, items: list[T]) -> bool:
        """Write ``items`` only when the key holds nothing yet."""
        with self._store.locked(self._key):
            if self.exists():
                return False
            self.save(items)
            return True

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self.load():
            if predicate(item):
                return item
        return None

    def replace(self, predicate: Callable[[T], bool], update: Callable[[T], T]) -> Optional[T]:
        """Apply ``update`` to the first matching item and persist; None if no match."""
        with self._store.locked(self._key):
            items = self.load()
            for index, item in enumerate(items):
                if predicate(item):
                    items[index] = update(item)
                    self.save(items)
                    return items[index]
        return None

    def remove(self, predicate: Callable[[T], bool]) -> int:
        with self._store.locked(self._key):
            items = self.load()
            kept = [item for item in items if not predicate(item)]
            removed = len(items) - len(kept)
            if removed:
                self.save(kept)
        return removed
