# -*- coding: utf-8 -*-

from __future__ import annotations

import json
from typing import List

from ..core.errors import NotFoundError
from .base import BaseService, decode_json, require_text

SETTING_CATEGORIES = ("general", "notifications", "appearance", "privacy")


class SettingsService(BaseService):
    """Kullanıcı ayarları; değerler JSON olarak saklanır."""

    logger_name = "ikpro.settings"

    def _row(self, row) -> dict:
        return {
            "category": row["category"],
            "key": row["key"],
            "value": decode_json(row["value"]),
            "updated_at": row["updated_at"],
        }

    def list_for_user(self, user_id: str, category: str = "") -> List[dict]:
        return [self._row(r) for r in self.db.settings.list_for_user(user_id, category or None)]

    def get(self, user_id: str, category: str, key: str) -> dict:
        row = self.db.settings.get(user_id, category, key)
        if row is None:
            raise NotFoundError("Ayar bulunamadı.")
        return self._row(row)

    def set(self, user_id: str, data: dict) -> dict:
        category = require_text(data, "category", "Ayar kategorisi zorunludur.")
        if category not in SETTING_CATEGORIES:
            raise ValueError("Geçersiz ayar kategorisi.")
        key = require_text(data, "key", "Ayar anahtarı zorunludur.")
        self.db.settings.set(user_id, category, key, json.dumps(data.get("value"), ensure_ascii=False))
        self.logger.info("setting %s.%s updated for %s", category, key, user_id)
        self.audit(user_id, "upsert", "setting", f"{category}.{key}")
        return self.get(user_id, category, key)

    def delete(self, user_id: str, category: str, key: str) -> None:
        if not self.db.settings.delete(user_id, category, key):
            raise NotFoundError("Ayar bulunamadı.")
        self.audit(user_id, "delete", "setting", f"{category}.{key}")
