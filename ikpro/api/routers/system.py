# -*- coding: utf-8 -*-

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...services.context import Services
from ..deps import get_services

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
def health(services: Services = Depends(get_services)):
    return services.system.health()
