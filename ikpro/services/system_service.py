# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
import time

from ..core.version import __version__
from .base import BaseService, decode_json, rows_to_dicts


class SystemService(BaseService):
    logger_name = "ikpro.system"

    def __init__(self, db):
        super().__init__(db)
        self._started = time.monotonic()

    def health(self) -> dict:
        try:
            database = self.db.ping()
        except sqlite3.Error as exc:
            self.logger.error("health: database unreachable: %s", exc)
            database = False
        return {
            "status": "ok" if database else "degraded",
            "database": database,
            "uptime_seconds": int(time.monotonic() - self._started),
            "version": __version__,
        }

    def activities(self, limit: int = 20) -> list:
        return rows_to_dicts(self.db.activity.list_activities(max(1, min(int(limit), 200))))

    def audit_logs(self, company_id=None, limit: int = 200) -> list:
        rows = rows_to_dicts(self.db.activity.audit_list(company_id, limit=max(1, min(int(limit), 1000))))
        for r in rows:
            if r.get("details"):
                r["details"] = decode_json(r["details"])
        return rows
