# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

_SELECT = """
SELECT p.*, e.first_name, e.last_name, e.company_id
FROM performance p
JOIN employees e ON e.id=p.employee_id
"""


class PerformanceRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(self, company_id: Optional[int] = None, employee_id: Optional[int] = None) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if company_id is not None:
            clauses.append("e.company_id=?")
            params.append(int(company_id))
        if employee_id is not None:
            clauses.append("p.employee_id=?")
            params.append(int(employee_id))
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(
            self.conn.execute(
                f"{_SELECT} {where} ORDER BY p.review_date DESC, p.id DESC",
                tuple(params),
            )
        )

    def get(self, review_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_SELECT + " WHERE p.id=?", (int(review_id),)).fetchone()

    def create(self, data: dict) -> int:
        cur = self.conn.execute(
            """
            INSERT INTO performance(employee_id, review_period, score, goals, achievements, feedback, reviewed_by, review_date)
            VALUES(?,?,?,?,?,?,?,?)
            """,
            (
                int(data["employee_id"]),
                data["review_period"],
                float(data["score"]),
                data.get("goals", ""),
                data.get("achievements", ""),
                data.get("feedback", ""),
                data.get("reviewed_by"),
                data["review_date"],
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, review_id: int, data: dict) -> None:
        self.conn.execute(
            """
            UPDATE performance
            SET review_period=?, score=?, goals=?, achievements=?, feedback=?, reviewed_by=?, review_date=?
            WHERE id=?
            """,
            (
                data["review_period"],
                float(data["score"]),
                data.get("goals", ""),
                data.get("achievements", ""),
                data.get("feedback", ""),
                data.get("reviewed_by"),
                data["review_date"],
                int(review_id),
            ),
        )
        self.conn.commit()

    def delete(self, review_id: int) -> None:
        self.conn.execute("DELETE FROM performance WHERE id=?", (int(review_id),))
        self.conn.commit()

    def average_for(self, employee_id: int) -> float:
        row = self.conn.execute(
            "SELECT AVG(score) FROM performance WHERE employee_id=?",
            (int(employee_id),),
        ).fetchone()
        return float(row[0] or 0.0)
