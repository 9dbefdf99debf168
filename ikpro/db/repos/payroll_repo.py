# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso

_SELECT = """
SELECT p.*, e.first_name, e.last_name, e.position, e.company_id, e.email,
       d.name AS department_name
FROM payroll p
JOIN employees e ON e.id=p.employee_id
LEFT JOIN departments d ON d.id=e.department_id
"""


class PayrollRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(
        self,
        company_id: Optional[int] = None,
        month: Optional[str] = None,
        status: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if company_id is not None:
            clauses.append("e.company_id=?")
            params.append(int(company_id))
        if month:
            clauses.append("p.month=?")
            params.append(month)
        if status:
            clauses.append("p.status=?")
            params.append(status)
        if employee_id is not None:
            clauses.append("p.employee_id=?")
            params.append(int(employee_id))
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(
            self.conn.execute(
                f"{_SELECT} {where} ORDER BY p.month DESC, e.last_name, e.first_name",
                tuple(params),
            )
        )

    def get(self, payroll_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_SELECT + " WHERE p.id=?", (int(payroll_id),)).fetchone()

    def get_for_month(self, employee_id: int, month: str) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            "SELECT * FROM payroll WHERE employee_id=? AND month=?",
            (int(employee_id), month),
        ).fetchone()

    def latest_for_employee(self, employee_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            _SELECT + " WHERE p.employee_id=? AND p.status<>'cancelled' ORDER BY p.month DESC LIMIT 1",
            (int(employee_id),),
        ).fetchone()

    def create(self, data: dict) -> int:
        ts = now_iso()
        cur = self.conn.execute(
            """
            INSERT INTO payroll(employee_id, month, base_salary, bonuses, deductions, net_salary, payment_date, status, created_at, updated_at)
            VALUES(?,?,?,?,?,?,?,?,?,?)
            """,
            (
                int(data["employee_id"]),
                data["month"],
                float(data["base_salary"]),
                float(data.get("bonuses") or 0),
                float(data.get("deductions") or 0),
                float(data["net_salary"]),
                data.get("payment_date"),
                data.get("status", "pending"),
                ts,
                ts,
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, payroll_id: int, data: dict) -> None:
        self.conn.execute(
            """
            UPDATE payroll
            SET base_salary=?, bonuses=?, deductions=?, net_salary=?, payment_date=?, updated_at=?
            WHERE id=?
            """,
            (
                float(data["base_salary"]),
                float(data.get("bonuses") or 0),
                float(data.get("deductions") or 0),
                float(data["net_salary"]),
                data.get("payment_date"),
                now_iso(),
                int(payroll_id),
            ),
        )
        self.conn.commit()

    def set_status(self, payroll_id: int, status: str, payment_date: Optional[str] = None) -> None:
        self.conn.execute(
            "UPDATE payroll SET status=?, payment_date=COALESCE(?, payment_date), updated_at=? WHERE id=?",
            (status, payment_date, now_iso(), int(payroll_id)),
        )
        self.conn.commit()

    def delete(self, payroll_id: int) -> None:
        self.conn.execute("DELETE FROM payroll WHERE id=?", (int(payroll_id),))
        self.conn.commit()

    def monthly_totals(self, company_id: Optional[int] = None) -> List[sqlite3.Row]:
        clauses = ["p.status<>'cancelled'"]
        params: List[object] = []
        if company_id is not None:
            clauses.append("e.company_id=?")
            params.append(int(company_id))
        return list(
            self.conn.execute(
                f"""
                SELECT p.month, COUNT(*) AS n, COALESCE(SUM(p.net_salary), 0) AS total
                FROM payroll p JOIN employees e ON e.id=p.employee_id
                WHERE {" AND ".join(clauses)}
                GROUP BY p.month
                ORDER BY p.month
                """,
                tuple(params),
            )
        )
