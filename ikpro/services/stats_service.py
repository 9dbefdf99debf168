# -*- coding: utf-8 -*-
"""İstatistikler ve rol bazlı gösterge panelleri.

Hepsi küçük listeler üzerinde tek geçişlik toplama; sıfıra bölme korumalı.
"""

from __future__ import annotations

from typing import Optional

from ..config import CURRENCY, LEAVE_TYPES
from ..utils import fmt_currency, safe_ratio
from .base import rows_to_dicts, BaseService
from .company_service import CompanyService
from .employee_service import EmployeeService
from .leave_service import LeaveService
from .notification_service import NotificationService
from .payroll_service import PayrollService
from .performance_service import PerformanceService
from .recruitment_service import RecruitmentService
from .system_service import SystemService
from .training_service import TrainingService

RECENT_LIMIT = 10


class StatsService(BaseService):
    logger_name = "ikpro.stats"

    def __init__(
        self,
        db,
        companies: CompanyService,
        employees: EmployeeService,
        leaves: LeaveService,
        payroll: PayrollService,
        performance: PerformanceService,
        trainings: TrainingService,
        recruitment: RecruitmentService,
        notifications: NotificationService,
        system: SystemService,
    ):
        super().__init__(db)
        self.companies = companies
        self.employees = employees
        self.leaves = leaves
        self.payroll = payroll
        self.performance = performance
        self.trainings = trainings
        self.recruitment = recruitment
        self.notifications = notifications
        self.system = system

    # -----------------
    # İstatistikler
    # -----------------
    def employee_stats(self, company_id: Optional[int] = None) -> dict:
        rows = self.db.employees.list(company_id=company_id)
        total = len(rows)
        active = sum(1 for r in rows if r["status"] == "active")
        scored = [float(r["performance_score"]) for r in rows if float(r["performance_score"] or 0) > 0]
        avg_score = round(sum(scored) / len(scored), 2) if scored else 0.0

        distribution = rows_to_dicts(self.db.employees.counts_by_department(company_id))
        for d in distribution:
            d["percentage"] = safe_ratio(d["count"], total)

        return {
            "total_employees": total,
            "active_employees": active,
            "avg_performance_score": avg_score,
            "department_distribution": distribution,
        }

    def leave_stats(self, company_id: Optional[int] = None) -> dict:
        by_status = {"pending": 0, "approved": 0, "rejected": 0, "cancelled": 0}
        by_type: dict = {}
        total = 0
        for r in self.db.leaves.counts(company_id):
            n = int(r["n"])
            total += n
            by_status[r["status"]] = by_status.get(r["status"], 0) + n
            by_type[r["leave_type"]] = by_type.get(r["leave_type"], 0) + n
        return {
            "total_leaves": total,
            "pending_leaves": by_status["pending"],
            "approved_leaves": by_status["approved"],
            "rejected_leaves": by_status["rejected"],
            "cancelled_leaves": by_status["cancelled"],
            "leaves_by_type": [
                {"type": t, "label": LEAVE_TYPES.get(t, t), "count": c}
                for t, c in sorted(by_type.items(), key=lambda kv: (-kv[1], kv[0]))
            ],
        }

    def payroll_stats(self, company_id: Optional[int] = None) -> dict:
        return self.payroll.stats(company_id)

    def company_stats(self) -> dict:
        return self.companies.stats()

    def department_analytics(self, company_id: Optional[int] = None) -> list:
        rows = rows_to_dicts(self.db.departments.analytics(company_id))
        total = sum(int(r["headcount"]) for r in rows)
        for r in rows:
            r["headcount_percentage"] = safe_ratio(r["headcount"], total)
            r["avg_performance"] = round(float(r["avg_performance"] or 0), 2)
            r["total_salary"] = round(float(r["total_salary"] or 0), 2)
        return rows

    def dashboard_stats(self, company_id: Optional[int] = None) -> dict:
        emp = self.employee_stats(company_id)
        leave = self.leave_stats(company_id)
        pay = self.payroll.stats(company_id)
        return {
            "total_employees": emp["total_employees"],
            "active_leaves": leave["pending_leaves"],
            "monthly_payroll": fmt_currency(pay["monthly_payroll"], CURRENCY),
            "avg_performance": f"{emp['avg_performance_score']:.1f}",
            "pending_applications": self.recruitment.pending_applications(company_id),
            "upcoming_trainings": self.trainings.upcoming_count(company_id),
        }

    # -----------------
    # Rol panelleri
    # -----------------
    def admin_dashboard(self, company_id: Optional[int] = None) -> dict:
        return {
            "stats": self.dashboard_stats(company_id),
            "companies": self.company_stats(),
            "recent_audit": rows_to_dicts(self.db.activity.audit_list(company_id, limit=RECENT_LIMIT)),
            "system": self.system.health(),
        }

    def hr_manager_dashboard(self, company_id: Optional[int] = None) -> dict:
        return {
            "stats": self.dashboard_stats(company_id),
            "pending_leaves": self.leaves.list_pending(company_id),
            "department_distribution": self.employee_stats(company_id)["department_distribution"],
            "recent_activities": rows_to_dicts(self.db.activity.list_activities(RECENT_LIMIT)),
        }

    def employee_dashboard(self, employee_id: int) -> dict:
        employee = self.employees.get(employee_id)
        user_id = employee.get("user_id")
        return {
            "profile": employee,
            "leaves": self.leaves.list_by_employee(employee_id),
            "leave_balance": self.leaves.balance(employee_id),
            "latest_payslip": self.payroll.latest_for_employee(employee_id),
            "reviews": self.performance.list_by_employee(employee_id),
            "trainings": self.trainings.enrollments(employee_id=employee_id),
            "unread_notifications": self.notifications.unread_count(str(user_id)) if user_id else 0,
        }
