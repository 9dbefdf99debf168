# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import PerformanceIn

router = APIRouter(prefix="/performance", tags=["performance"])


@router.get("")
def list_reviews(
    company_id: Optional[int] = None,
    employee_id: Optional[int] = None,
    services: Services = Depends(get_services),
):
    return services.performance.list(company_id, employee_id)


@router.get("/employee/{employee_id}")
def list_employee_reviews(employee_id: int, services: Services = Depends(get_services)):
    return services.performance.list_by_employee(employee_id)


@router.get("/{review_id}")
def get_review(review_id: int, services: Services = Depends(get_services)):
    return services.performance.get(review_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_review(body: PerformanceIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.performance.create(body.data(), actor=actor)


@router.put("/{review_id}")
def update_review(
    review_id: int,
    body: PerformanceIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.performance.update(review_id, body.data(), actor=actor)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(review_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.performance.delete(review_id, actor=actor)
