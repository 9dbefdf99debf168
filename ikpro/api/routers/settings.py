# -*- coding: utf-8 -*-

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_services, require_user
from ..schemas import SettingIn

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
def list_settings(category: str = "", services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.settings.list_for_user(user_id, category)


@router.put("")
def set_setting(body: SettingIn, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.settings.set(user_id, body.data())


@router.get("/{category}/{key}")
def get_setting(category: str, key: str, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.settings.get(user_id, category, key)


@router.delete("/{category}/{key}", status_code=status.HTTP_204_NO_CONTENT)
def delete_setting(
    category: str,
    key: str,
    services: Services = Depends(get_services),
    user_id: str = Depends(require_user),
):
    services.settings.delete(user_id, category, key)
