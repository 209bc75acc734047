from __future__ import annotations

import hashlib
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from .connection import DatabaseConnection
from .kv_store import KeyValueStore, StoreLockTimeout
from .mysql_base import db_cursor, fetchall, fetchone


def mysql_lock_name(name: str) -> str:
    # GET_LOCK names are limited to 64 characters.
    return "pt:" + hashlib.sha1(name.encode("utf-8")).hexdigest()


class MySQLKeyValueStore(KeyValueStore):
    """Key-value store backed by the ``kv_store`` table (see bootstrap).

    Locks are MySQL named locks, so they hold across processes sharing the
    database, not only across threads.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, lock_timeout: int = 10):
        self._conn_factory = conn_factory
        self._lock_timeout = int(lock_timeout)

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT store_value FROM kv_store WHERE store_key=%s", (key,))
            row = fetchone(cur)
            return row["store_value"] if row else None

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(store_key, store_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (key, value),
            )

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE store_key=%s", (key,))
            return cur.rowcount > 0

    def keys(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT store_key FROM kv_store ORDER BY store_key")
            return [r["store_key"] for r in fetchall(cur)]

    @contextmanager
    def locked(self, name: str) -> Iterator[None]:
        lock_name = mysql_lock_name(name)
        # The named lock belongs to this connection; keep it open until release.
        conn = self._conn_factory.connect()
        try:
            cur = conn.cursor()
            cur.execute("SELECT GET_LOCK(%s, %s)", (lock_name, self._lock_timeout))
            row = cur.fetchone()
            if not row or row[0] != 1:
                raise StoreLockTimeout(f"Timed out waiting for lock {name!r}")
            try:
                yield
            finally:
                cur.execute("SELECT RELEASE_LOCK(%s)", (lock_name,))
                cur.fetchone()
                cur.close()
        finally:
            conn.close()
