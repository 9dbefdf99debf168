# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso

_JOB_SELECT = """
SELECT j.*, d.name AS department_name,
       (SELECT COUNT(*) FROM job_applications a WHERE a.job_id=j.id) AS application_count
FROM jobs j
LEFT JOIN departments d ON d.id=j.department_id
"""

_APP_SELECT = """
SELECT a.*, j.title AS job_title, j.company_id
FROM job_applications a
JOIN jobs j ON j.id=a.job_id
"""

_JOB_COLS = (
    "title", "department_id", "description", "requirements", "location",
    "employment_type", "salary_min", "salary_max", "status",
)


class JobsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    # -----------------
    # İlanlar
    # -----------------
    def list(self, company_id: Optional[int] = None, status: Optional[str] = None) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if company_id is not None:
            clauses.append("j.company_id=?")
            params.append(int(company_id))
        if status:
            clauses.append("j.status=?")
            params.append(status)
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(self.conn.execute(f"{_JOB_SELECT} {where} ORDER BY j.created_at DESC, j.id DESC", tuple(params)))

    def get(self, job_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_JOB_SELECT + " WHERE j.id=?", (int(job_id),)).fetchone()

    def create(self, company_id: int, data: dict) -> int:
        ts = now_iso()
        cols = ", ".join(_JOB_COLS)
        marks = ",".join("?" for _ in _JOB_COLS)
        cur = self.conn.execute(
            f"INSERT INTO jobs(company_id, {cols}, created_at, updated_at) VALUES(?,{marks},?,?)",
            (int(company_id), *[data.get(c) for c in _JOB_COLS], ts, ts),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, job_id: int, data: dict) -> None:
        sets = ", ".join(f"{c}=?" for c in _JOB_COLS)
        self.conn.execute(
            f"UPDATE jobs SET {sets}, updated_at=? WHERE id=?",
            (*[data.get(c) for c in _JOB_COLS], now_iso(), int(job_id)),
        )
        self.conn.commit()

    def delete(self, job_id: int) -> None:
        self.conn.execute("DELETE FROM jobs WHERE id=?", (int(job_id),))
        self.conn.commit()

    # -----------------
    # Başvurular
    # -----------------
    def application_list(
        self,
        job_id: Optional[int] = None,
        status: Optional[str] = None,
        company_id: Optional[int] = None,
    ) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if job_id is not None:
            clauses.append("a.job_id=?")
            params.append(int(job_id))
        if status:
            clauses.append("a.status=?")
            params.append(status)
        if company_id is not None:
            clauses.append("j.company_id=?")
            params.append(int(company_id))
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(self.conn.execute(f"{_APP_SELECT} {where} ORDER BY a.applied_at DESC, a.id DESC", tuple(params)))

    def application_get(self, app_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_APP_SELECT + " WHERE a.id=?", (int(app_id),)).fetchone()

    def application_create(self, data: dict) -> int:
        ts = now_iso()
        cur = self.conn.execute(
            """
            INSERT INTO job_applications(job_id, candidate_name, candidate_email, candidate_phone, resume_url, cover_letter, status, notes, applied_at, updated_at)
            VALUES(?,?,?,?,?,?,?,?,?,?)
            """,
            (
                int(data["job_id"]),
                data["candidate_name"].strip(),
                data["candidate_email"].strip(),
                data.get("candidate_phone", ""),
                data.get("resume_url", ""),
                data.get("cover_letter", ""),
                "submitted",
                data.get("notes", ""),
                ts,
                ts,
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def application_set_status(self, app_id: int, status: str, notes: Optional[str] = None) -> None:
        self.conn.execute(
            "UPDATE job_applications SET status=?, notes=COALESCE(?, notes), updated_at=? WHERE id=?",
            (status, notes, now_iso(), int(app_id)),
        )
        self.conn.commit()

    def application_delete(self, app_id: int) -> None:
        self.conn.execute("DELETE FROM job_applications WHERE id=?", (int(app_id),))
        self.conn.commit()

    def application_count(self, status: str, company_id: Optional[int] = None) -> int:
        sql = "SELECT COUNT(*) FROM job_applications a JOIN jobs j ON j.id=a.job_id WHERE a.status=?"
        params: List[object] = [status]
        if company_id is not None:
            sql += " AND j.company_id=?"
            params.append(int(company_id))
        return int(self.conn.execute(sql, tuple(params)).fetchone()[0])

    # -----------------
    # Mülakatlar
    # -----------------
    def interview_list(self, application_id: Optional[int] = None) -> List[sqlite3.Row]:
        sql = """
            SELECT i.*, a.candidate_name, a.job_id
            FROM interviews i JOIN job_applications a ON a.id=i.application_id
        """
        params: tuple = ()
        if application_id is not None:
            sql += " WHERE i.application_id=?"
            params = (int(application_id),)
        return list(self.conn.execute(sql + " ORDER BY i.scheduled_at DESC, i.id DESC", params))

    def interview_get(self, interview_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute("SELECT * FROM interviews WHERE id=?", (int(interview_id),)).fetchone()

    def interview_create(self, data: dict) -> int:
        cur = self.conn.execute(
            """
            INSERT INTO interviews(application_id, interviewer_id, scheduled_at, interview_type, status, feedback, rating, created_at)
            VALUES(?,?,?,?,?,?,?,?)
            """,
            (
                int(data["application_id"]),
                data.get("interviewer_id"),
                data["scheduled_at"],
                data.get("interview_type", ""),
                data.get("status", "scheduled"),
                data.get("feedback", ""),
                data.get("rating"),
                now_iso(),
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def interview_update(self, interview_id: int, data: dict) -> None:
        self.conn.execute(
            """
            UPDATE interviews SET interviewer_id=?, scheduled_at=?, interview_type=?, status=?, feedback=?, rating=?
            WHERE id=?
            """,
            (
                data.get("interviewer_id"),
                data["scheduled_at"],
                data.get("interview_type", ""),
                data.get("status", "scheduled"),
                data.get("feedback", ""),
                data.get("rating"),
                int(interview_id),
            ),
        )
        self.conn.commit()

    def interview_delete(self, interview_id: int) -> None:
        self.conn.execute("DELETE FROM interviews WHERE id=?", (int(interview_id),))
        self.conn.commit()
