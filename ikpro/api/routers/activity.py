# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ...services.context import Services
from ..deps import get_services

router = APIRouter(tags=["activity"])


@router.get("/activities")
def list_activities(limit: int = 20, services: Services = Depends(get_services)):
    return services.system.activities(limit)


@router.get("/audit-logs")
def list_audit_logs(
    company_id: Optional[int] = None,
    limit: int = 200,
    services: Services = Depends(get_services),
):
    return services.system.audit_logs(company_id, limit)
