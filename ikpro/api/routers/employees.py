# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import EmployeeIn, StatusIn

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("")
def list_employees(
    company_id: Optional[int] = None,
    department_id: Optional[int] = None,
    status: Optional[str] = None,
    q: str = "",
    services: Services = Depends(get_services),
):
    return services.employees.list(company_id, department_id, status, q)


@router.get("/by-email")
def get_employee_by_email(company_id: int, email: str, services: Services = Depends(get_services)):
    return services.employees.get_by_email(company_id, email)


@router.get("/{emp_id}")
def get_employee(emp_id: int, services: Services = Depends(get_services)):
    return services.employees.get(emp_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_employee(body: EmployeeIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.employees.create(body.data(), actor=actor)


@router.put("/{emp_id}")
def update_employee(
    emp_id: int,
    body: EmployeeIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.employees.update(emp_id, body.data(), actor=actor)


@router.put("/{emp_id}/status")
def set_employee_status(
    emp_id: int,
    body: StatusIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.employees.set_status(emp_id, body.status, actor=actor)


@router.delete("/{emp_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(emp_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.employees.delete(emp_id, actor=actor)
