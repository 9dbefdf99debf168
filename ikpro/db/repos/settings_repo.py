# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso


class SettingsRepo:
    """Kullanıcı bazlı ayarlar: (user_id, category, key) -> value (JSON metni)."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list_for_user(self, user_id: str, category: Optional[str] = None) -> List[sqlite3.Row]:
        if category:
            return list(
                self.conn.execute(
                    "SELECT * FROM user_settings WHERE user_id=? AND category=? ORDER BY key",
                    (str(user_id), category),
                )
            )
        return list(
            self.conn.execute(
                "SELECT * FROM user_settings WHERE user_id=? ORDER BY category, key",
                (str(user_id),),
            )
        )

    def get(self, user_id: str, category: str, key: str) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM user_settings WHERE user_id=? AND category=? AND key=?",
            (str(user_id), category, key),
        ).fetchone()

    def set(self, user_id: str, category: str, key: str, value: str) -> None:
        self.conn.execute(
            """
            INSERT INTO user_settings(user_id, category, key, value, updated_at) VALUES(?,?,?,?,?)
            ON CONFLICT(user_id, category, key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
            """,
            (str(user_id), category, key, value, now_iso()),
        )
        self.conn.commit()

    def delete(self, user_id: str, category: str, key: str) -> int:
        cur = self.conn.execute(
            "DELETE FROM user_settings WHERE user_id=? AND category=? AND key=?",
            (str(user_id), category, key),
        )
        self.conn.commit()
        return int(cur.rowcount or 0)
