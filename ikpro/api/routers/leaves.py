# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import LeaveIn, LeaveRejectIn

router = APIRouter(prefix="/leaves", tags=["leaves"])


@router.get("")
def list_leaves(
    company_id: Optional[int] = None,
    status: Optional[str] = None,
    employee_id: Optional[int] = None,
    services: Services = Depends(get_services),
):
    return services.leaves.list(company_id, status, employee_id)


@router.get("/pending")
def list_pending_leaves(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.leaves.list_pending(company_id)


@router.get("/types")
def list_leave_types(services: Services = Depends(get_services)):
    return services.leaves.types()


@router.get("/employee/{employee_id}")
def list_employee_leaves(employee_id: int, services: Services = Depends(get_services)):
    return services.leaves.list_by_employee(employee_id)


@router.get("/balance/{employee_id}")
def leave_balance(employee_id: int, year: Optional[int] = None, services: Services = Depends(get_services)):
    return services.leaves.balance(employee_id, year)


@router.get("/{leave_id}")
def get_leave(leave_id: int, services: Services = Depends(get_services)):
    return services.leaves.get(leave_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_leave(body: LeaveIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.leaves.create(body.data(), actor=actor)


@router.put("/{leave_id}")
def update_leave(leave_id: int, body: LeaveIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.leaves.update(leave_id, body.data(), actor=actor)


@router.post("/{leave_id}/approve")
def approve_leave(leave_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.leaves.approve(leave_id, actor=actor)


@router.post("/{leave_id}/reject")
def reject_leave(
    leave_id: int,
    body: Optional[LeaveRejectIn] = None,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.leaves.reject(leave_id, (body.reason if body else None) or "", actor=actor)


@router.post("/{leave_id}/cancel")
def cancel_leave(leave_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.leaves.cancel(leave_id, actor=actor)


@router.delete("/{leave_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_leave(leave_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.leaves.delete(leave_id, actor=actor)
