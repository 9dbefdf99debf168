# -*- coding: utf-8 -*-
"""İstatistik ve rol bazlı gösterge paneli uçları."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ...services.context import Services
from ..deps import get_services

router = APIRouter(tags=["stats"])


@router.get("/stats/employees")
def employee_stats(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.stats.employee_stats(company_id)


@router.get("/stats/leaves")
def leave_stats(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.stats.leave_stats(company_id)


@router.get("/stats/payroll")
def payroll_stats(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.stats.payroll_stats(company_id)


@router.get("/stats/companies")
def company_stats(services: Services = Depends(get_services)):
    return services.stats.company_stats()


@router.get("/stats/departments")
def department_analytics(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.stats.department_analytics(company_id)


@router.get("/stats/dashboard")
def dashboard_stats(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.stats.dashboard_stats(company_id)


@router.get("/dashboard/admin")
def admin_dashboard(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.stats.admin_dashboard(company_id)


@router.get("/dashboard/hr-manager")
def hr_manager_dashboard(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.stats.hr_manager_dashboard(company_id)


@router.get("/dashboard/employee/{employee_id}")
def employee_dashboard(employee_id: int, services: Services = Depends(get_services)):
    return services.stats.employee_dashboard(employee_id)
