# -*- coding: utf-8 -*-
"""Route'ların ortak bağımlılıkları."""

from __future__ import annotations

from typing import Optional

from fastapi import Header, Request

from ..services.base import SYSTEM_ACTOR
from ..services.context import Services


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_actor(x_user_id: Optional[str] = Header(default=None)) -> str:
    """İşlemi yapan kullanıcı; kimlik doğrulama yok, başlık güvenilir kabul edilir."""
    return (x_user_id or "").strip() or SYSTEM_ACTOR


def require_user(x_user_id: Optional[str] = Header(default=None)) -> str:
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise ValueError("X-User-Id başlığı zorunlu.")
    return user_id
