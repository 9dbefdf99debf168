# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso


class CompaniesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(self) -> List[sqlite3.Row]:
        return list(
            self.conn.execute(
                """
                SELECT c.*,
                       (SELECT COUNT(*) FROM employees e WHERE e.company_id=c.id) AS employee_count
                FROM companies c
                ORDER BY c.name
                """
            )
        )

    def get(self, company_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute("SELECT * FROM companies WHERE id=?", (int(company_id),)).fetchone()

    def create(self, data: dict) -> int:
        ts = now_iso()
        cur = self.conn.execute(
            """
            INSERT INTO companies(name, industry, address, phone, email, website, tax_number, description, created_at, updated_at)
            VALUES(?,?,?,?,?,?,?,?,?,?)
            """,
            (
                data["name"],
                data.get("industry", ""),
                data.get("address", ""),
                data.get("phone", ""),
                data.get("email", ""),
                data.get("website", ""),
                data.get("tax_number", ""),
                data.get("description", ""),
                ts,
                ts,
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, company_id: int, data: dict) -> None:
        self.conn.execute(
            """
            UPDATE companies
            SET name=?, industry=?, address=?, phone=?, email=?, website=?, tax_number=?, description=?, updated_at=?
            WHERE id=?
            """,
            (
                data["name"],
                data.get("industry", ""),
                data.get("address", ""),
                data.get("phone", ""),
                data.get("email", ""),
                data.get("website", ""),
                data.get("tax_number", ""),
                data.get("description", ""),
                now_iso(),
                int(company_id),
            ),
        )
        self.conn.commit()

    def delete(self, company_id: int) -> None:
        self.conn.execute("DELETE FROM companies WHERE id=?", (int(company_id),))
        self.conn.commit()

    def count(self) -> int:
        return int(self.conn.execute("SELECT COUNT(*) FROM companies").fetchone()[0])

    def count_with_active_employees(self) -> int:
        return int(
            self.conn.execute(
                """
                SELECT COUNT(DISTINCT company_id) FROM employees WHERE status='active'
                """
            ).fetchone()[0]
        )
