# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso


class DocumentsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list(
        self,
        company_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        category: Optional[str] = None,
        include_inactive: bool = False,
    ) -> List[sqlite3.Row]:
        clauses: List[str] = []
        params: List[object] = []
        if not include_inactive:
            clauses.append("active=1")
        if company_id is not None:
            clauses.append("company_id=?")
            params.append(int(company_id))
        if employee_id is not None:
            clauses.append("employee_id=?")
            params.append(int(employee_id))
        if category:
            clauses.append("category=?")
            params.append(category)
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        return list(self.conn.execute(f"SELECT * FROM documents {where} ORDER BY uploaded_at DESC, id DESC", tuple(params)))

    def get(self, doc_id: int) -> Optional[sqlite3.Row]:
        return self.conn.execute("SELECT * FROM documents WHERE id=?", (int(doc_id),)).fetchone()

    def create(self, data: dict) -> int:
        cur = self.conn.execute(
            """
            INSERT INTO documents(company_id, employee_id, title, category, original_name, file_path, mime, size_bytes, sha256, uploaded_by, uploaded_at, active)
            VALUES(?,?,?,?,?,?,?,?,?,?,?,1)
            """,
            (
                int(data["company_id"]),
                data.get("employee_id"),
                data["title"],
                data.get("category", ""),
                data["original_name"],
                data["file_path"],
                data["mime"],
                int(data["size_bytes"]),
                data["sha256"],
                data.get("uploaded_by", ""),
                now_iso(),
            ),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def set_file_path(self, doc_id: int, file_path: str) -> None:
        self.conn.execute("UPDATE documents SET file_path=? WHERE id=?", (file_path, int(doc_id)))
        self.conn.commit()

    def deactivate(self, doc_id: int) -> None:
        self.conn.execute("UPDATE documents SET active=0 WHERE id=?", (int(doc_id),))
        self.conn.commit()
