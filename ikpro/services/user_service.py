# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..config import USER_ROLES
from ..core.errors import ConflictError
from ..utils import is_valid_email
from .base import BaseService, clean_text, require_choice

_FIELDS = ("email", "first_name", "last_name", "phone", "company_id", "role", "is_active")
MIN_PASSWORD_LEN = 6


def role_label(role: str) -> str:
    return USER_ROLES.get(role, role)


class UserService(BaseService):
    logger_name = "ikpro.users"

    def _decorate(self, row) -> dict:
        d = dict(row)
        d["is_active"] = bool(d.get("is_active"))
        d["role_label"] = role_label(d.get("role") or "")
        return d

    def list(self, company_id: Optional[int] = None, role: Optional[str] = None) -> List[dict]:
        return [self._decorate(r) for r in self.db.users.list(company_id=company_id, role=role)]

    def get(self, user_id: int) -> dict:
        return self._decorate(self._found(self.db.users.get(user_id), "Kullanıcı bulunamadı."))

    def roles(self) -> List[dict]:
        return [{"value": k, "label": v} for k, v in USER_ROLES.items()]

    def _validate(self, data: dict, user_id: Optional[int] = None) -> dict:
        clean = {
            "email": clean_text(data.get("email")),
            "first_name": clean_text(data.get("first_name")),
            "last_name": clean_text(data.get("last_name")),
            "phone": clean_text(data.get("phone")),
            "company_id": data.get("company_id"),
            "role": clean_text(data.get("role") or "employee"),
            "is_active": bool(data.get("is_active", True)),
        }
        if not clean["email"]:
            raise ValueError("E-posta zorunludur.")
        if not is_valid_email(clean["email"]):
            raise ValueError("Geçersiz e-posta formatı.")
        require_choice(clean["role"], USER_ROLES, "Geçersiz kullanıcı rolü.")
        if clean["company_id"] is not None:
            self._found(self.db.companies.get(clean["company_id"]), "Şirket bulunamadı.")
        other = self.db.users.get_by_email(clean["email"])
        if other is not None and int(other["id"]) != int(user_id or 0):
            raise ConflictError("Bu e-posta ile kayıtlı bir kullanıcı zaten var.")
        return clean

    @staticmethod
    def _check_password(password: Optional[str]) -> str:
        password = password or ""
        if len(password) < MIN_PASSWORD_LEN:
            raise ValueError(f"Şifre en az {MIN_PASSWORD_LEN} karakter olmalıdır.")
        return password

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        password = self._check_password(data.get("password"))
        clean = self._validate(data)
        user_id = self.db.users.create(clean, password)
        self.audit(actor, "create", "user", user_id, {"email": clean["email"], "role": clean["role"]}, clean["company_id"])
        return self.get(user_id)

    def update(self, user_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(user_id)
        password = self._check_password(data["password"]) if data.get("password") else None
        merged = {k: data[k] if k in data and data[k] is not None else current.get(k) for k in _FIELDS}
        clean = self._validate(merged, user_id=user_id)
        self.db.users.update(user_id, clean)
        if password is not None:
            self.db.users.set_password(user_id, password)
            self.audit(actor, "password_change", "user", user_id, None, clean["company_id"])
        self.audit(actor, "update", "user", user_id, sorted(k for k in data if k in _FIELDS), clean["company_id"])
        return self.get(user_id)

    def delete(self, user_id: int, actor: Optional[str] = None) -> None:
        current = self.get(user_id)
        self.db.users.delete(user_id)
        self.audit(actor, "delete", "user", user_id, current["email"], current.get("company_id"))
