# -*- coding: utf-8 -*-

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services, require_user
from ..schemas import NotificationIn

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
def list_notifications(limit: int = 50, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.notifications.list_for_user(user_id, limit=max(1, min(limit, 200)))


@router.get("/unread-count")
def unread_count(services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return {"count": services.notifications.unread_count(user_id)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_notification(body: NotificationIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.notifications.create(body.data(), actor=actor)


@router.put("/read-all")
def mark_all_read(services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return {"updated": services.notifications.mark_all_read(user_id)}


@router.put("/{notif_id}/read")
def mark_read(notif_id: int, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.notifications.mark_read(notif_id, user_id)


@router.delete("/{notif_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(notif_id: int, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    services.notifications.delete(notif_id, user_id)
