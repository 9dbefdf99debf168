# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..config import HR_NOTIFY_ROLES
from ..core.errors import NotFoundError
from .base import BaseService, require_choice, require_text, rows_to_dicts

NOTIFICATION_TYPES = ("info", "success", "warning", "error")
LIST_LIMIT = 50


class NotificationService(BaseService):
    logger_name = "ikpro.notifications"

    def list_for_user(self, user_id: str, limit: int = LIST_LIMIT) -> List[dict]:
        rows = rows_to_dicts(self.db.notifications.list_for_user(user_id, limit=limit))
        for r in rows:
            r["is_read"] = bool(r["is_read"])
        return rows

    def unread_count(self, user_id: str) -> int:
        return self.db.notifications.unread_count(user_id)

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        user_id = require_text(data, "user_id", "Bildirim alıcısı zorunludur.")
        title = require_text(data, "title", "Bildirim başlığı zorunludur.")
        message = require_text(data, "message", "Bildirim mesajı zorunludur.")
        type_ = require_choice(data.get("type") or "info", NOTIFICATION_TYPES, "Geçersiz bildirim tipi.")
        notif_id = self.db.notifications.create(user_id, title, message, type_, data.get("action_url") or "")
        self.logger.info("notification #%s -> %s: %s", notif_id, user_id, title)
        self.audit(actor, "create", "notification", notif_id, {"user_id": user_id, "title": title})
        return self._own(notif_id, user_id)

    def notify(self, user_id: object, title: str, message: str, type_: str = "info", action_url: str = "") -> int:
        """Servis içi kısayol: doğrulama yapmadan bildirim yazar."""
        return self.db.notifications.create(str(user_id), title, message, type_, action_url)

    def notify_hr(self, company_id: Optional[int], title: str, message: str, action_url: str = "") -> int:
        users = self.db.users.list_by_roles(HR_NOTIFY_ROLES, company_id=company_id)
        for u in users:
            self.notify(u["id"], title, message, "info", action_url)
        return len(users)

    def _own(self, notif_id: int, user_id: str) -> dict:
        row = self.db.notifications.get(notif_id)
        if row is None or str(row["user_id"]) != str(user_id):
            raise NotFoundError("Bildirim bulunamadı.")
        d = dict(row)
        d["is_read"] = bool(d["is_read"])
        return d

    def mark_read(self, notif_id: int, user_id: str) -> dict:
        self._own(notif_id, user_id)
        self.db.notifications.mark_read(notif_id)
        self.audit(user_id, "read", "notification", notif_id)
        return self._own(notif_id, user_id)

    def mark_all_read(self, user_id: str) -> int:
        n = self.db.notifications.mark_all_read(user_id)
        if n:
            self.audit(user_id, "read_all", "notification", None, {"updated": n})
        return n

    def delete(self, notif_id: int, user_id: str) -> None:
        self._own(notif_id, user_id)
        self.db.notifications.delete(notif_id)
        self.audit(user_id, "delete", "notification", notif_id)
