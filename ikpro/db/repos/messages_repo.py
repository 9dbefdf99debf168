# -*- coding: utf-8 -*-
"""Kullanıcılar arası mesajlaşma veritabanı erişim katmanı."""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso


class MessagesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create(self, from_user_id: str, to_user_id: str, subject: str, content: str) -> int:
        cur = self.conn.execute(
            """
            INSERT INTO messages(from_user_id, to_user_id, subject, content, is_read, created_at)
            VALUES(?,?,?,?,0,?)
            """,
            (str(from_user_id), str(to_user_id), subject, content, now_iso()),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def get(self, message_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute("SELECT * FROM messages WHERE id=?", (int(message_id),)).fetchone()

    def list_inbox(self, user_id: str, only_unread: bool = False, limit: int = 100) -> List[sqlite3.Row]:
        sql = "SELECT * FROM messages WHERE to_user_id=?"
        if only_unread:
            sql += " AND is_read=0"
        return list(self.conn.execute(sql + " ORDER BY created_at DESC, id DESC LIMIT ?", (str(user_id), int(limit))))

    def list_sent(self, user_id: str, limit: int = 100) -> List[sqlite3.Row]:
        return list(
            self.conn.execute(
                "SELECT * FROM messages WHERE from_user_id=? ORDER BY created_at DESC, id DESC LIMIT ?",
                (str(user_id), int(limit)),
            )
        )

    def list_for_user(self, user_id: str, limit: int = 100) -> List[sqlite3.Row]:
        return list(
            self.conn.execute(
                """
                SELECT * FROM messages WHERE to_user_id=? OR from_user_id=?
                ORDER BY created_at DESC, id DESC LIMIT ?
                """,
                (str(user_id), str(user_id), int(limit)),
            )
        )

    def mark_read(self, message_id: int) -> None:
        self.conn.execute(
            "UPDATE messages SET is_read=1, read_at=? WHERE id=? AND is_read=0",
            (now_iso(), int(message_id)),
        )
        self.conn.commit()

    def unread_count(self, user_id: str) -> int:
        return int(
            self.conn.execute(
                "SELECT COUNT(*) FROM messages WHERE to_user_id=? AND is_read=0",
                (str(user_id),),
            ).fetchone()[0]
        )

    def delete(self, message_id: int) -> None:
        self.conn.execute("DELETE FROM messages WHERE id=?", (int(message_id),))
        self.conn.commit()
