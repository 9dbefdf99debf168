# -*- coding: utf-8 -*-
"""Aktivite akışı ve denetim (audit) kayıtları."""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...utils import now_iso


class ActivityRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    # -----------------
    # Aktiviteler
    # -----------------
    def add_activity(
        self,
        type_: str,
        description: str,
        entity_id: Optional[int] = None,
        performed_by: str = "",
        metadata: str = "",
    ) -> int:
        cur = self.conn.execute(
            "INSERT INTO activities(type, description, entity_id, performed_by, metadata, timestamp) VALUES(?,?,?,?,?,?)",
            (type_, description, entity_id, performed_by, metadata, now_iso()),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def list_activities(self, limit: int = 20) -> List[sqlite3.Row]:
        return list(
            self.conn.execute(
                "SELECT * FROM activities ORDER BY timestamp DESC, id DESC LIMIT ?",
                (int(limit),),
            )
        )

    # -----------------
    # Audit
    # -----------------
    def audit_log(
        self,
        actor: str,
        action: str,
        resource: str,
        resource_id: Optional[object] = None,
        details: str = "",
        company_id: Optional[int] = None,
    ) -> None:
        self.conn.execute(
            """
            INSERT INTO audit_logs(actor, action, resource, resource_id, details, company_id, created_at)
            VALUES(?,?,?,?,?,?,?)
            """,
            (
                actor,
                action,
                resource,
                "" if resource_id is None else str(resource_id),
                details,
                int(company_id) if company_id is not None else None,
                now_iso(),
            ),
        )
        self.conn.commit()

    def audit_list(self, company_id: Optional[int] = None, limit: int = 200) -> List[sqlite3.Row]:
        if company_id is None:
            return list(
                self.conn.execute("SELECT * FROM audit_logs ORDER BY id DESC LIMIT ?", (int(limit),))
            )
        return list(
            self.conn.execute(
                "SELECT * FROM audit_logs WHERE company_id=? ORDER BY id DESC LIMIT ?",
                (int(company_id), int(limit)),
            )
        )
