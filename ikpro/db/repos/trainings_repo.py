# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso

_PROGRAM_SELECT = """
SELECT t.*,
       (SELECT COUNT(*) FROM training_enrollments te
        WHERE te.training_id=t.id AND te.status<>'cancelled') AS enrolled_count
FROM trainings t
"""

_ENROLL_SELECT = """
SELECT te.*, t.title AS training_title, t.status AS training_status,
       e.first_name, e.last_name
FROM training_enrollments te
JOIN trainings t ON t.id=te.training_id
JOIN employees e ON e.id=te.employee_id
"""


class TrainingsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    # -----------------
    # Programlar
    # -----------------
    def list(self, company_id: Optional[int] = None, status: Optional[str] = None) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if company_id is not None:
            clauses.append("t.company_id=?")
            params.append(int(company_id))
        if status:
            clauses.append("t.status=?")
            params.append(status)
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(
            self.conn.execute(
                f"{_PROGRAM_SELECT} {where} ORDER BY COALESCE(t.start_date, '9999-12-31'), t.id DESC",
                tuple(params),
            )
        )

    def get(self, training_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_PROGRAM_SELECT + " WHERE t.id=?", (int(training_id),)).fetchone()

    def create(self, company_id: int, data: dict) -> int:
        ts = now_iso()
        cur = self.conn.execute(
            """
            INSERT INTO trainings(company_id, title, description, instructor, category, start_date, end_date, capacity, status, created_at, updated_at)
            VALUES(?,?,?,?,?,?,?,?,?,?,?)
            """,
            (
                int(company_id),
                data["title"].strip(),
                data.get("description", ""),
                data.get("instructor", ""),
                data.get("category", ""),
                data.get("start_date"),
                data.get("end_date"),
                int(data.get("capacity") or 0),
                data.get("status", "planned"),
                ts,
                ts,
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, training_id: int, data: dict) -> None:
        self.conn.execute(
            """
            UPDATE trainings
            SET title=?, description=?, instructor=?, category=?, start_date=?, end_date=?, capacity=?, status=?, updated_at=?
            WHERE id=?
            """,
            (
                data["title"].strip(),
                data.get("description", ""),
                data.get("instructor", ""),
                data.get("category", ""),
                data.get("start_date"),
                data.get("end_date"),
                int(data.get("capacity") or 0),
                data.get("status", "planned"),
                now_iso(),
                int(training_id),
            ),
        )
        self.conn.commit()

    def delete(self, training_id: int) -> None:
        self.conn.execute("DELETE FROM trainings WHERE id=?", (int(training_id),))
        self.conn.commit()

    def count_by_status(self, status: str, company_id: Optional[int] = None) -> int:
        sql = "SELECT COUNT(*) FROM trainings WHERE status=?"
        params: List[object] = [status]
        if company_id is not None:
            sql += " AND company_id=?"
            params.append(int(company_id))
        return int(self.conn.execute(sql, tuple(params)).fetchone()[0])

    # -----------------
    # Katılımlar
    # -----------------
    def enrollment_list(
        self,
        training_id: Optional[int] = None,
        employee_id: Optional[int] = None,
    ) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if training_id is not None:
            clauses.append("te.training_id=?")
            params.append(int(training_id))
        if employee_id is not None:
            clauses.append("te.employee_id=?")
            params.append(int(employee_id))
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(
            self.conn.execute(
                f"{_ENROLL_SELECT} {where} ORDER BY te.enrolled_at DESC, te.id DESC",
                tuple(params),
            )
        )

    def enrollment_get(self, enrollment_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_ENROLL_SELECT + " WHERE te.id=?", (int(enrollment_id),)).fetchone()

    def enrollment_find(self, training_id: int, employee_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM training_enrollments WHERE training_id=? AND employee_id=?",
            (int(training_id), int(employee_id)),
        ).fetchone()

    def enrollment_create(self, training_id: int, employee_id: int) -> int:
        cur = self.conn.execute(
            "INSERT INTO training_enrollments(training_id, employee_id, status, enrolled_at) VALUES(?,?,?,?)",
            (int(training_id), int(employee_id), "enrolled", now_iso()),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def enrollment_reactivate(self, enrollment_id: int) -> None:
        self.conn.execute(
            "UPDATE training_enrollments SET status='enrolled', score=NULL, completed_at=NULL, enrolled_at=? WHERE id=?",
            (now_iso(), int(enrollment_id)),
        )
        self.conn.commit()

    def enrollment_set_status(self, enrollment_id: int, status: str, score: Optional[float] = None) -> None:
        completed_at = now_iso() if status == "completed" else None
        self.conn.execute(
            "UPDATE training_enrollments SET status=?, score=?, completed_at=? WHERE id=?",
            (status, score, completed_at, int(enrollment_id)),
        )
        self.conn.commit()
