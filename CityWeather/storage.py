"""
SQLite key/value persistence - the durable storage behind history and theme.

Zero external dependencies. Every write commits immediately.
"""
import logging
import sqlite3
from typing import Optional


class KeyValueStorage:
    """Durable string-to-string storage in a single SQLite table."""

    def __init__(self, db_path: str = ":memory:"):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
            """)
            self._conn.commit()
            logging.debug(f"Opened key/value storage at {self.db_path}")
        return self._conn

    def get(self, key: str) -> Optional[str]:
        row = self._get_conn().execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        conn = self._get_conn()
        conn.execute("INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)", (key, value))
        conn.commit()

    def remove(self, key: str) -> None:
        conn = self._get_conn()
        conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        conn.commit()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
