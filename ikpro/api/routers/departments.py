# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import DepartmentIn

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("")
def list_departments(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.departments.list(company_id)


@router.get("/{dept_id}")
def get_department(dept_id: int, services: Services = Depends(get_services)):
    return services.departments.get(dept_id)


@router.get("/{dept_id}/employees")
def list_department_employees(dept_id: int, services: Services = Depends(get_services)):
    return services.employees.list_by_department(dept_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_department(body: DepartmentIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.departments.create(body.data(), actor=actor)


@router.put("/{dept_id}")
def update_department(
    dept_id: int,
    body: DepartmentIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.departments.update(dept_id, body.data(), actor=actor)


@router.delete("/{dept_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(dept_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.departments.delete(dept_id, actor=actor)
