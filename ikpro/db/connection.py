# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
import threading
from typing import Any


class ConnectionProxy:
    """Her thread için ayrı bir sqlite3.Connection açan vekil nesne.

    FastAPI senkron handler'ları thread havuzunda çalışır; tek bir sqlite
    bağlantısını thread'ler arasında paylaşmak yerine repo'lar yine
    `conn.execute(...)` çağırır, bağlantı thread başına açılır.
    """

    def __init__(self, path: str):
        self.path = path
        self._local = threading.local()
        self._lock = threading.Lock()
        self._all: list[sqlite3.Connection] = []

    def _ensure(self) -> sqlite3.Connection:
        conn = getattr(self._local, "conn", None)
        if conn is None:
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON;")
            conn.execute("PRAGMA busy_timeout = 5000;")
            self._local.conn = conn
            with self._lock:
                self._all.append(conn)
        return conn

    def execute(self, *args: Any, **kwargs: Any):
        return self._ensure().execute(*args, **kwargs)

    def executemany(self, *args: Any, **kwargs: Any):
        return self._ensure().executemany(*args, **kwargs)

    def cursor(self, *args: Any, **kwargs: Any):
        return self._ensure().cursor(*args, **kwargs)

    def commit(self):
        return self._ensure().commit()

    def rollback(self):
        return self._ensure().rollback()

    def close(self):
        with self._lock:
            conns, self._all = self._all, []
        for conn in conns:
            conn.close()
        self._local = threading.local()


def connect(path: str) -> ConnectionProxy:
    """Verilen DB yolu için ConnectionProxy döndürür."""
    return ConnectionProxy(path)
