# -*- coding: utf-8 -*-

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_services, require_user
from ..schemas import MessageIn

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("")
def list_messages(services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.messages.list_for_user(user_id)


@router.get("/inbox")
def inbox(unread: bool = False, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.messages.inbox(user_id, only_unread=unread)


@router.get("/sent")
def sent(services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.messages.sent(user_id)


@router.get("/unread-count")
def unread_count(services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return {"count": services.messages.unread_count(user_id)}


@router.get("/{message_id}")
def get_message(message_id: int, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.messages.get(message_id, user_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def send_message(body: MessageIn, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.messages.send(user_id, body.data())


@router.put("/{message_id}/read")
def mark_read(message_id: int, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    return services.messages.mark_read(message_id, user_id)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(message_id: int, services: Services = Depends(get_services), user_id: str = Depends(require_user)):
    services.messages.delete(message_id, user_id)
