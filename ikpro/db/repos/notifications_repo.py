# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso


class NotificationsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list_for_user(self, user_id: str, limit: int = 50) -> List[sqlite3.Row]:
        return list(
            self.conn.execute(
                "SELECT * FROM notifications WHERE user_id=? ORDER BY created_at DESC, id DESC LIMIT ?",
                (str(user_id), int(limit)),
            )
        )

    def get(self, notif_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute("SELECT * FROM notifications WHERE id=?", (int(notif_id),)).fetchone()

    def unread_count(self, user_id: str) -> int:
        return int(
            self.conn.execute(
                "SELECT COUNT(*) FROM notifications WHERE user_id=? AND is_read=0",
                (str(user_id),),
            ).fetchone()[0]
        )

    def create(self, user_id: str, title: str, message: str, type_: str = "info", action_url: str = "") -> int:
        cur = self.conn.execute(
            "INSERT INTO notifications(user_id, title, message, type, is_read, action_url, created_at) VALUES(?,?,?,?,0,?,?)",
            (str(user_id), title, message, type_, action_url or "", now_iso()),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def mark_read(self, notif_id: int) -> None:
        self.conn.execute(
            "UPDATE notifications SET is_read=1, read_at=? WHERE id=? AND is_read=0",
            (now_iso(), int(notif_id)),
        )
        self.conn.commit()

    def mark_all_read(self, user_id: str) -> int:
        cur = self.conn.execute(
            "UPDATE notifications SET is_read=1, read_at=? WHERE user_id=? AND is_read=0",
            (now_iso(), str(user_id)),
        )
        self.conn.commit()
        return int(cur.rowcount or 0)

    def delete(self, notif_id: int) -> None:
        self.conn.execute("DELETE FROM notifications WHERE id=?", (int(notif_id),))
        self.conn.commit()
