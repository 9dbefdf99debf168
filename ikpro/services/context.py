# -*- coding: utf-8 -*-
"""Servis konteyneri.

Uygulama açılırken tek bir yerde oluşturulur ve API'ye `app.state.services`
olarak verilir.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import ANNUAL_LEAVE_DAYS, UPLOAD_MAX_BYTES
from ..db.main_db import DB
from ..modules.documents.service import DocumentService
from ..modules.importer.service import EmployeeImportService
from .company_service import CompanyService
from .department_service import DepartmentService
from .employee_service import EmployeeService
from .export_service import ExportService
from .leave_service import LeaveService
from .messages_service import MessagesService
from .notification_service import NotificationService
from .payroll_service import PayrollService
from .performance_service import PerformanceService
from .recruitment_service import RecruitmentService
from .settings_service import SettingsService
from .stats_service import StatsService
from .system_service import SystemService
from .training_service import TrainingService
from .user_service import UserService


@dataclass
class Services:
    db: DB

    exporter: ExportService
    companies: CompanyService
    users: UserService
    departments: DepartmentService
    employees: EmployeeService
    notifications: NotificationService
    leaves: LeaveService
    performance: PerformanceService
    payroll: PayrollService
    trainings: TrainingService
    recruitment: RecruitmentService
    messages: MessagesService
    documents: DocumentService
    settings: SettingsService
    system: SystemService
    stats: StatsService
    importer: EmployeeImportService

    @classmethod
    def build(
        cls,
        db: DB,
        storage_dir: Optional[str] = None,
        upload_max_bytes: int = UPLOAD_MAX_BYTES,
        annual_leave_days: int = ANNUAL_LEAVE_DAYS,
    ) -> "Services":
        exporter = ExportService()
        companies = CompanyService(db)
        employees = EmployeeService(db)
        departments = DepartmentService(db)
        notifications = NotificationService(db)
        leaves = LeaveService(db, notifications, annual_days=annual_leave_days)
        performance = PerformanceService(db, employees)
        payroll = PayrollService(db, exporter)
        trainings = TrainingService(db)
        recruitment = RecruitmentService(db)
        system = SystemService(db)
        stats = StatsService(
            db,
            companies=companies,
            employees=employees,
            leaves=leaves,
            payroll=payroll,
            performance=performance,
            trainings=trainings,
            recruitment=recruitment,
            notifications=notifications,
            system=system,
        )
        return cls(
            db=db,
            exporter=exporter,
            companies=companies,
            users=UserService(db),
            departments=departments,
            employees=employees,
            notifications=notifications,
            leaves=leaves,
            performance=performance,
            payroll=payroll,
            trainings=trainings,
            recruitment=recruitment,
            messages=MessagesService(db, notifications),
            documents=DocumentService(db, storage_dir=storage_dir, max_bytes=upload_max_bytes),
            settings=SettingsService(db),
            system=system,
            stats=stats,
            importer=EmployeeImportService(db, employees, departments, exporter, max_bytes=upload_max_bytes),
        )
