# -*- coding: utf-8 -*-
"""Tüm route'lar tek bir router altında toplanır; `app.py` bunu `/api` ile ekler."""

from __future__ import annotations

from fastapi import APIRouter

from .routers import (
    activity,
    companies,
    departments,
    documents,
    employees,
    importer,
    leaves,
    messages,
    notifications,
    payroll,
    performance,
    recruitment,
    settings,
    stats,
    system,
    trainings,
    users,
)

router = APIRouter()

for _module in (
    companies,
    users,
    departments,
    employees,
    leaves,
    performance,
    payroll,
    trainings,
    recruitment,
    notifications,
    messages,
    documents,
    activity,
    settings,
    stats,
    importer,
    system,
):
    router.include_router(_module.router)
