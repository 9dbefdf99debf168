# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional, Sequence

from ...utils import now_iso

_SELECT = """
SELECT l.*, e.first_name, e.last_name, e.company_id, e.user_id AS employee_user_id,
       d.name AS department_name
FROM leaves l
JOIN employees e ON e.id=l.employee_id
LEFT JOIN departments d ON d.id=e.department_id
"""


class LeavesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(
        self,
        company_id: Optional[int] = None,
        status: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if company_id is not None:
            clauses.append("e.company_id=?")
            params.append(int(company_id))
        if status:
            clauses.append("l.status=?")
            params.append(status)
        if employee_id is not None:
            clauses.append("l.employee_id=?")
            params.append(int(employee_id))
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(
            self.conn.execute(
                f"{_SELECT} {where} ORDER BY l.applied_at DESC, l.id DESC",
                tuple(params),
            )
        )

    def get(self, leave_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_SELECT + " WHERE l.id=?", (int(leave_id),)).fetchone()

    def find_overlapping(
        self,
        employee_id: int,
        start_date: str,
        end_date: str,
        statuses: Sequence[str] = ("pending", "approved"),
        exclude_id: Optional[int] = None,
    ) -> List[sqlite3.Row]:
        marks = ",".join("?" for _ in statuses)
        sql = (
            f"SELECT * FROM leaves WHERE employee_id=? AND status IN ({marks})"
            " AND start_date<=? AND end_date>=?"
        )
        params: List[object] = [int(employee_id), *statuses, end_date, start_date]
        if exclude_id is not None:
            sql += " AND id<>?"
            params.append(int(exclude_id))
        return list(self.conn.execute(sql, tuple(params)))

    def create(self, data: dict) -> int:
        cur = self.conn.execute(
            """
            INSERT INTO leaves(employee_id, leave_type, start_date, end_date, days, status, reason, applied_at)
            VALUES(?,?,?,?,?,?,?,?)
            """,
            (
                int(data["employee_id"]),
                data["leave_type"],
                data["start_date"],
                data["end_date"],
                int(data["days"]),
                data.get("status", "pending"),
                data.get("reason", ""),
                now_iso(),
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, leave_id: int, data: dict) -> None:
        self.conn.execute(
            "UPDATE leaves SET leave_type=?, start_date=?, end_date=?, days=?, reason=? WHERE id=?",
            (
                data["leave_type"],
                data["start_date"],
                data["end_date"],
                int(data["days"]),
                data.get("reason", ""),
                int(leave_id),
            ),
        )
        self.conn.commit()

    def set_status(
        self,
        leave_id: int,
        status: str,
        approved_by: str = "",
        rejection_reason: str = "",
    ) -> None:
        approved_at = now_iso() if status in ("approved", "rejected") else None
        self.conn.execute(
            "UPDATE leaves SET status=?, approved_by=?, approved_at=COALESCE(?, approved_at), rejection_reason=? WHERE id=?",
            (status, approved_by, approved_at, rejection_reason, int(leave_id)),
        )
        self.conn.commit()

    def delete(self, leave_id: int) -> None:
        self.conn.execute("DELETE FROM leaves WHERE id=?", (int(leave_id),))
        self.conn.commit()

    def used_days(self, employee_id: int, leave_type: str, year: int) -> int:
        row = self.conn.execute(
            """
            SELECT COALESCE(SUM(days), 0) FROM leaves
            WHERE employee_id=? AND leave_type=? AND status='approved' AND substr(start_date,1,4)=?
            """,
            (int(employee_id), leave_type, f"{int(year):04d}"),
        ).fetchone()
        return int(row[0] or 0)

    def counts(self, company_id: Optional[int] = None) -> List[sqlite3.Row]:
        where = "WHERE e.company_id=?" if company_id is not None else ""
        params = (int(company_id),) if company_id is not None else ()
        return list(
            self.conn.execute(
                f"""
                SELECT l.status, l.leave_type, COUNT(*) AS n
                FROM leaves l JOIN employees e ON e.id=l.employee_id
                {where}
                GROUP BY l.status, l.leave_type
                """,
                params,
            )
        )
