# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso

_SELECT = """
SELECT e.*, d.name AS department_name
FROM employees e
LEFT JOIN departments d ON d.id=e.department_id
"""

_COLS = (
    "first_name", "last_name", "email", "phone", "department_id", "position",
    "start_date", "salary", "status", "address", "emergency_contact", "notes", "user_id",
)


class EmployeesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(
        self,
        company_id: Optional[int] = None,
        department_id: Optional[int] = None,
        status: Optional[str] = None,
        q: str = "",
    ) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if company_id is not None:
            clauses.append("e.company_id=?")
            params.append(int(company_id))
        if department_id is not None:
            clauses.append("e.department_id=?")
            params.append(int(department_id))
        if status:
            clauses.append("e.status=?")
            params.append(status)
        if q:
            like = f"%{q.strip()}%"
            clauses.append(
                "(e.first_name LIKE ? OR e.last_name LIKE ? OR e.email LIKE ? OR e.position LIKE ?"
                " OR (e.first_name || ' ' || e.last_name) LIKE ?)"
            )
            params.extend([like, like, like, like, like])
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(
            self.conn.execute(
                f"{_SELECT} {where} ORDER BY e.last_name, e.first_name, e.id",
                tuple(params),
            )
        )

    def get(self, emp_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_SELECT + " WHERE e.id=?", (int(emp_id),)).fetchone()

    def get_by_email(self, company_id: int, email: str) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            _SELECT + " WHERE e.company_id=? AND lower(e.email)=lower(?)",
            (int(company_id), email.strip()),
        ).fetchone()

    def create(self, company_id: int, data: dict) -> int:
        ts = now_iso()
        cols = ", ".join(_COLS)
        marks = ",".join("?" for _ in _COLS)
        cur = self.conn.execute(
            f"INSERT INTO employees(company_id, {cols}, created_at, updated_at) VALUES(?,{marks},?,?)",
            (int(company_id), *[data.get(c) for c in _COLS], ts, ts),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, emp_id: int, data: dict) -> None:
        sets = ", ".join(f"{c}=?" for c in _COLS)
        self.conn.execute(
            f"UPDATE employees SET {sets}, updated_at=? WHERE id=?",
            (*[data.get(c) for c in _COLS], now_iso(), int(emp_id)),
        )
        self.conn.commit()

    def set_status(self, emp_id: int, status: str) -> None:
        self.conn.execute(
            "UPDATE employees SET status=?, updated_at=? WHERE id=?",
            (status, now_iso(), int(emp_id)),
        )
        self.conn.commit()

    def set_performance_score(self, emp_id: int, score: float) -> None:
        self.conn.execute(
            "UPDATE employees SET performance_score=?, updated_at=? WHERE id=?",
            (float(score), now_iso(), int(emp_id)),
        )
        self.conn.commit()

    def delete(self, emp_id: int) -> None:
        self.conn.execute("DELETE FROM employees WHERE id=?", (int(emp_id),))
        self.conn.commit()

    def counts_by_department(self, company_id: Optional[int] = None) -> List[sqlite3.Row]:
        where = "WHERE e.company_id=?" if company_id is not None else ""
        params = (int(company_id),) if company_id is not None else ()
        return list(
            self.conn.execute(
                f"""
                SELECT d.id AS department_id, d.company_id, COALESCE(d.name, 'Atanmamış') AS department, COUNT(*) AS count
                FROM employees e
                LEFT JOIN departments d ON d.id=e.department_id
                {where}
                GROUP BY d.id, d.name
                ORDER BY count DESC, department, d.company_id
                """,
                params,
            )
        )
