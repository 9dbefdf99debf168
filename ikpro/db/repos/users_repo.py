# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional, Sequence

from ...utils import make_salt, hash_password, now_iso

# pass_hash / salt dışarı verilmez
_PUBLIC_COLS = (
    "id, email, first_name, last_name, phone, company_id, role, is_active, "
    "last_login_at, created_at, updated_at"
)


class UsersRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(self, company_id: Optional[int] = None, role: Optional[str] = None) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if company_id is not None:
            clauses.append("company_id=?")
            params.append(int(company_id))
        if role:
            clauses.append("role=?")
            params.append(role)
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(
            self.conn.execute(
                f"SELECT {_PUBLIC_COLS} FROM users {where} ORDER BY email",
                tuple(params),
            )
        )

    def list_by_roles(self, roles: Sequence[str], company_id: Optional[int] = None) -> List[sqlite3.Row]:
        if not roles:
            return []
        marks = ",".join("?" for _ in roles)
        params: List[object] = list(roles)
        sql = f"SELECT {_PUBLIC_COLS} FROM users WHERE is_active=1 AND role IN ({marks})"
        if company_id is not None:
            sql += " AND (company_id=? OR company_id IS NULL)"
            params.append(int(company_id))
        return list(self.conn.execute(sql + " ORDER BY id", tuple(params)))

    def get(self, user_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(f"SELECT {_PUBLIC_COLS} FROM users WHERE id=?", (int(user_id),)).fetchone()

    def get_by_email(self, email: str) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            f"SELECT {_PUBLIC_COLS} FROM users WHERE lower(email)=lower(?)",
            (email.strip(),),
        ).fetchone()

    def create(self, data: dict, password: str) -> int:
        salt = make_salt()
        ts = now_iso()
        cur = self.conn.execute(
            """
            INSERT INTO users(email, first_name, last_name, phone, company_id, role, salt, pass_hash, is_active, created_at, updated_at)
            VALUES(?,?,?,?,?,?,?,?,?,?,?)
            """,
            (
                data["email"].strip(),
                data.get("first_name", ""),
                data.get("last_name", ""),
                data.get("phone", ""),
                data.get("company_id"),
                data.get("role", "employee"),
                salt,
                hash_password(password, salt),
                1 if data.get("is_active", True) else 0,
                ts,
                ts,
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, user_id: int, data: dict) -> None:
        self.conn.execute(
            """
            UPDATE users
            SET email=?, first_name=?, last_name=?, phone=?, company_id=?, role=?, is_active=?, updated_at=?
            WHERE id=?
            """,
            (
                data["email"].strip(),
                data.get("first_name", ""),
                data.get("last_name", ""),
                data.get("phone", ""),
                data.get("company_id"),
                data.get("role", "employee"),
                1 if data.get("is_active", True) else 0,
                now_iso(),
                int(user_id),
            ),
        )
        self.conn.commit()

    def set_password(self, user_id: int, new_password: str) -> None:
        salt = make_salt()
        self.conn.execute(
            "UPDATE users SET salt=?, pass_hash=?, updated_at=? WHERE id=?",
            (salt, hash_password(new_password, salt), now_iso(), int(user_id)),
        )
        self.conn.commit()

    def delete(self, user_id: int) -> None:
        self.conn.execute("DELETE FROM users WHERE id=?", (int(user_id),))
        self.conn.commit()
