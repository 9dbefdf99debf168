# -*- coding: utf-8 -*-
"""İKPro DB (SQLite) erişim katmanı.

Servisler bu sınıfı kullanır; içeride repository'lere delegasyon yapar.
"""

from __future__ import annotations

import logging

from .connection import connect
from .schema import init_schema, migrate_schema, seed_defaults
from .repos import (
    ActivityRepo,
    CompaniesRepo,
    DepartmentsRepo,
    DocumentsRepo,
    EmployeesRepo,
    JobsRepo,
    LeavesRepo,
    MessagesRepo,
    NotificationsRepo,
    PayrollRepo,
    PerformanceRepo,
    SettingsRepo,
    TrainingsRepo,
    UsersRepo,
)

logger = logging.getLogger("ikpro.db")


class DB:
    def __init__(self, path: str, seed: bool = True):
        self.path = path
        self.conn = connect(path)

        # Önce tablolar, sonra migrasyon + seed
        init_schema(self.conn)

        self.companies = CompaniesRepo(self.conn)
        self.users = UsersRepo(self.conn)
        self.departments = DepartmentsRepo(self.conn)
        self.employees = EmployeesRepo(self.conn)
        self.leaves = LeavesRepo(self.conn)
        self.performance = PerformanceRepo(self.conn)
        self.payroll = PayrollRepo(self.conn)
        self.trainings = TrainingsRepo(self.conn)
        self.jobs = JobsRepo(self.conn)
        self.notifications = NotificationsRepo(self.conn)
        self.messages = MessagesRepo(self.conn)
        self.documents = DocumentsRepo(self.conn)
        self.activity = ActivityRepo(self.conn)
        self.settings = SettingsRepo(self.conn)

        migrate_schema(self.conn, log_fn=self._log)
        if seed:
            seed_defaults(self.conn, log_fn=self._log)

    @staticmethod
    def _log(islem: str, detay: str = "") -> None:
        logger.info("%s: %s", islem, detay)

    def ping(self) -> bool:
        return self.conn.execute("SELECT 1").fetchone()[0] == 1

    def close(self) -> None:
        self.conn.close()
