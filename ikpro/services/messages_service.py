# -*- coding: utf-8 -*-
"""Kullanıcılar arası mesajlaşma servisi."""

from __future__ import annotations

from typing import List, Optional

from ..core.errors import NotFoundError
from .base import BaseService, clean_text, require_text, rows_to_dicts
from .notification_service import NotificationService

MAX_SUBJECT = 200


class MessagesService(BaseService):
    logger_name = "ikpro.messages"

    def __init__(self, db, notifications: Optional[NotificationService] = None):
        super().__init__(db)
        self.notifications = notifications

    @staticmethod
    def _decorate(rows) -> List[dict]:
        out = rows_to_dicts(rows)
        for r in out:
            r["is_read"] = bool(r["is_read"])
        return out

    def send(self, from_user_id: str, data: dict) -> dict:
        to_user_id = require_text(data, "to_user_id", "Alıcı seçimi zorunludur.")
        content = require_text(data, "content", "Mesaj içeriği zorunludur.")
        subject = clean_text(data.get("subject"))[:MAX_SUBJECT]
        if str(to_user_id) == str(from_user_id):
            raise ValueError("Kendinize mesaj gönderemezsiniz.")
        message_id = self.db.messages.create(from_user_id, to_user_id, subject, content)
        self.logger.info("message #%s %s -> %s", message_id, from_user_id, to_user_id)
        self.audit(from_user_id, "send", "message", message_id, {"to_user_id": to_user_id, "subject": subject})
        if self.notifications is not None:
            self.notifications.notify(
                to_user_id,
                "Yeni Mesaj",
                subject or content[:80],
                "info",
                action_url=f"/messages/{message_id}",
            )
        return self.get(message_id, from_user_id)

    def get(self, message_id: int, user_id: str) -> dict:
        row = self.db.messages.get(message_id)
        if row is None or str(user_id) not in (str(row["from_user_id"]), str(row["to_user_id"])):
            raise NotFoundError("Mesaj bulunamadı.")
        d = dict(row)
        d["is_read"] = bool(d["is_read"])
        return d

    def list_for_user(self, user_id: str) -> List[dict]:
        return self._decorate(self.db.messages.list_for_user(user_id))

    def inbox(self, user_id: str, only_unread: bool = False) -> List[dict]:
        return self._decorate(self.db.messages.list_inbox(user_id, only_unread=only_unread))

    def sent(self, user_id: str) -> List[dict]:
        return self._decorate(self.db.messages.list_sent(user_id))

    def unread_count(self, user_id: str) -> int:
        return self.db.messages.unread_count(user_id)

    def mark_read(self, message_id: int, user_id: str) -> dict:
        msg = self.get(message_id, user_id)
        if str(msg["to_user_id"]) != str(user_id):
            raise ValueError("Sadece alıcı mesajı okundu olarak işaretleyebilir.")
        self.db.messages.mark_read(message_id)
        self.audit(user_id, "read", "message", message_id)
        return self.get(message_id, user_id)

    def delete(self, message_id: int, user_id: str) -> None:
        self.get(message_id, user_id)
        self.db.messages.delete(message_id)
        self.logger.info("message #%s deleted by %s", message_id, user_id)
        self.audit(user_id, "delete", "message", message_id)
