# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import PayrollGenerateIn, PayrollIn, PayrollPayIn

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.get("")
def list_payroll(
    company_id: Optional[int] = None,
    month: Optional[str] = None,
    status: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return services.payroll.list(company_id, month, status)


@router.get("/employee/{employee_id}")
def list_employee_payroll(employee_id: int, services: Services = Depends(get_services)):
    return services.payroll.list_by_employee(employee_id)


@router.post("/generate")
def generate_payroll(body: PayrollGenerateIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.payroll.generate_month(body.company_id, body.month, actor=actor)


@router.get("/{payroll_id}")
def get_payroll(payroll_id: int, services: Services = Depends(get_services)):
    return services.payroll.get(payroll_id)


@router.get("/{payroll_id}/payslip.pdf")
def payslip_pdf(payroll_id: int, services: Services = Depends(get_services)):
    record = services.payroll.get(payroll_id)
    pdf = services.payroll.payslip_pdf(payroll_id)
    filename = f"bordro_{record['month']}_{payroll_id}.pdf"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_payroll(body: PayrollIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.payroll.create(body.data(), actor=actor)


@router.put("/{payroll_id}")
def update_payroll(
    payroll_id: int,
    body: PayrollIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.payroll.update(payroll_id, body.data(), actor=actor)


@router.post("/{payroll_id}/pay")
def pay_payroll(
    payroll_id: int,
    body: Optional[PayrollPayIn] = None,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.payroll.mark_paid(payroll_id, body.payment_date if body else None, actor=actor)


@router.post("/{payroll_id}/cancel")
def cancel_payroll(payroll_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.payroll.cancel(payroll_id, actor=actor)


@router.delete("/{payroll_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payroll(payroll_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.payroll.delete(payroll_id, actor=actor)
