# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import UserIn

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
def list_users(
    company_id: Optional[int] = None,
    role: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return services.users.list(company_id=company_id, role=role)


@router.get("/roles")
def list_roles(services: Services = Depends(get_services)):
    return services.users.roles()


@router.get("/{user_id}")
def get_user(user_id: int, services: Services = Depends(get_services)):
    return services.users.get(user_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(body: UserIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.users.create(body.data(), actor=actor)


@router.put("/{user_id}")
def update_user(user_id: int, body: UserIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.users.update(user_id, body.data(), actor=actor)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.users.delete(user_id, actor=actor)
