# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso

_SELECT = """
SELECT d.*,
       (SELECT COUNT(*) FROM employees e WHERE e.department_id=d.id) AS employee_count,
       TRIM(COALESCE(m.first_name,'') || ' ' || COALESCE(m.last_name,'')) AS manager_name
FROM departments d
LEFT JOIN employees m ON m.id=d.manager_id
"""


class DepartmentsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(self, company_id: Optional[int] = None) -> List[sqlite3.Row]:
        if company_id is None:
            return list(self.conn.execute(_SELECT + " ORDER BY d.company_id, d.name"))
        return list(
            self.conn.execute(
                _SELECT + " WHERE d.company_id=? ORDER BY d.name",
                (int(company_id),),
            )
        )

    def get(self, dept_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute(_SELECT + " WHERE d.id=?", (int(dept_id),)).fetchone()

    def get_by_name(self, company_id: int, name: str) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            _SELECT + " WHERE d.company_id=? AND lower(d.name)=lower(?)",
            (int(company_id), name.strip()),
        ).fetchone()

    def create(self, company_id: int, data: dict) -> int:
        ts = now_iso()
        cur = self.conn.execute(
            """
            INSERT INTO departments(company_id, name, description, manager_id, budget, created_at, updated_at)
            VALUES(?,?,?,?,?,?,?)
            """,
            (
                int(company_id),
                data["name"].strip(),
                data.get("description", ""),
                data.get("manager_id"),
                data.get("budget"),
                ts,
                ts,
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def update(self, dept_id: int, data: dict) -> None:
        self.conn.execute(
            """
            UPDATE departments SET name=?, description=?, manager_id=?, budget=?, updated_at=?
            WHERE id=?
            """,
            (
                data["name"].strip(),
                data.get("description", ""),
                data.get("manager_id"),
                data.get("budget"),
                now_iso(),
                int(dept_id),
            ),
        )
        self.conn.commit()

    def delete(self, dept_id: int) -> None:
        self.conn.execute("DELETE FROM departments WHERE id=?", (int(dept_id),))
        self.conn.commit()

    def clear_manager(self, emp_id: int) -> None:
        self.conn.execute(
            "UPDATE departments SET manager_id=NULL, updated_at=? WHERE manager_id=?",
            (now_iso(), int(emp_id)),
        )
        self.conn.commit()

    def employee_count(self, dept_id: int) -> int:
        return int(
            self.conn.execute(
                "SELECT COUNT(*) FROM employees WHERE department_id=?",
                (int(dept_id),),
            ).fetchone()[0]
        )

    def analytics(self, company_id: Optional[int] = None) -> List[sqlite3.Row]:
        """Departman bazında kişi sayısı, ortalama performans ve toplam maaş."""
        where = "WHERE d.company_id=?" if company_id is not None else ""
        params = (int(company_id),) if company_id is not None else ()
        return list(
            self.conn.execute(
                f"""
                SELECT d.id, d.name,
                       COUNT(e.id) AS headcount,
                       COALESCE(AVG(CASE WHEN e.performance_score > 0 THEN e.performance_score END), 0) AS avg_performance,
                       COALESCE(SUM(e.salary), 0) AS total_salary
                FROM departments d
                LEFT JOIN employees e ON e.department_id=d.id
                {where}
                GROUP BY d.id, d.name
                ORDER BY d.name
                """,
                params,
            )
        )
