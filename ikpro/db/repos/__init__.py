# -*- coding: utf-8 -*-

from .activity_repo import ActivityRepo
from .companies_repo import CompaniesRepo
from .departments_repo import DepartmentsRepo
from .documents_repo import DocumentsRepo
from .employees_repo import EmployeesRepo
from .jobs_repo import JobsRepo
from .leaves_repo import LeavesRepo
from .messages_repo import MessagesRepo
from .notifications_repo import NotificationsRepo
from .payroll_repo import PayrollRepo
from .performance_repo import PerformanceRepo
from .settings_repo import SettingsRepo
from .trainings_repo import TrainingsRepo
from .users_repo import UsersRepo

__all__ = [
    "ActivityRepo",
    "CompaniesRepo",
    "DepartmentsRepo",
    "DocumentsRepo",
    "EmployeesRepo",
    "JobsRepo",
    "LeavesRepo",
    "MessagesRepo",
    "NotificationsRepo",
    "PayrollRepo",
    "PerformanceRepo",
    "SettingsRepo",
    "TrainingsRepo",
    "UsersRepo",
]
