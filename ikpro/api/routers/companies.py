# -*- coding: utf-8 -*-

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import CompanyIn

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("")
def list_companies(services: Services = Depends(get_services)):
    return services.companies.list()


@router.get("/{company_id}")
def get_company(company_id: int, services: Services = Depends(get_services)):
    return services.companies.get(company_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_company(body: CompanyIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.companies.create(body.data(), actor=actor)


@router.put("/{company_id}")
def update_company(
    company_id: int,
    body: CompanyIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.companies.update(company_id, body.data(), actor=actor)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(company_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.companies.delete(company_id, actor=actor)
