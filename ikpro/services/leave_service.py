# -*- coding: utf-8 -*-

from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..config import ANNUAL_LEAVE_DAYS, LEAVE_TYPES
from ..utils import calc_days, fmt_tr_date
from .base import BaseService, clean_text, require_choice, require_date
from .notification_service import NotificationService

LEAVE_STATUSES = ("pending", "approved", "rejected", "cancelled")
_ACTIVE = ("pending", "approved")


def leave_type_label(leave_type: str) -> str:
    return LEAVE_TYPES.get(leave_type, leave_type)


class LeaveService(BaseService):
    logger_name = "ikpro.leaves"

    def __init__(self, db, notifications: NotificationService, annual_days: int = ANNUAL_LEAVE_DAYS):
        super().__init__(db)
        self.notifications = notifications
        self.annual_days = int(annual_days)

    def _decorate(self, row) -> dict:
        d = dict(row)
        d["leave_type_label"] = leave_type_label(d.get("leave_type") or "")
        d["employee_name"] = f"{d.pop('first_name', '')} {d.pop('last_name', '')}".strip()
        return d

    def types(self) -> List[dict]:
        return [{"value": k, "label": v} for k, v in LEAVE_TYPES.items()]

    def list(
        self,
        company_id: Optional[int] = None,
        status: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> List[dict]:
        return [self._decorate(r) for r in self.db.leaves.list(company_id, status, employee_id)]

    def list_pending(self, company_id: Optional[int] = None) -> List[dict]:
        return self.list(company_id=company_id, status="pending")

    def list_by_employee(self, employee_id: int) -> List[dict]:
        self._found(self.db.employees.get(employee_id), "Personel bulunamadı.")
        return self.list(employee_id=employee_id)

    def get(self, leave_id: int) -> dict:
        return self._decorate(self._found(self.db.leaves.get(leave_id), "İzin talebi bulunamadı."))

    def _validate(self, employee_id: int, data: dict, leave_id: Optional[int] = None) -> dict:
        leave_type = require_choice(data.get("leave_type"), LEAVE_TYPES, "Geçersiz izin türü.")
        start = require_date(data.get("start_date"), "Geçersiz başlangıç tarihi.")
        end = require_date(data.get("end_date"), "Geçersiz bitiş tarihi.")
        if end < start:
            raise ValueError("Bitiş tarihi başlangıç tarihinden önce olamaz.")
        if self.db.leaves.find_overlapping(employee_id, start, end, _ACTIVE, exclude_id=leave_id):
            raise ValueError("İzin tarihleri çakışıyor.")
        return {
            "employee_id": employee_id,
            "leave_type": leave_type,
            "start_date": start,
            "end_date": end,
            "days": calc_days(start, end),
            "reason": clean_text(data.get("reason")),
        }

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("employee_id") is None:
            raise ValueError("Personel seçimi zorunludur.")
        employee = self._found(self.db.employees.get(data["employee_id"]), "Personel bulunamadı.")
        clean = self._validate(int(employee["id"]), data)
        leave_id = self.db.leaves.create(clean)

        full_name = f"{employee['first_name']} {employee['last_name']}"
        self.audit(actor, "create", "leave", leave_id, clean, employee["company_id"])
        self.activity("leave_requested", f"{full_name} izin talebinde bulundu", leave_id, actor)
        self.notifications.notify_hr(
            employee["company_id"],
            "Yeni İzin Talebi",
            f"{full_name} {fmt_tr_date(clean['start_date'])} - {fmt_tr_date(clean['end_date'])} tarihleri için "
            f"{leave_type_label(clean['leave_type'])} talep etti.",
            action_url=f"/leaves/{leave_id}",
        )
        return self.get(leave_id)

    def update(self, leave_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(leave_id)
        if current["status"] != "pending":
            raise ValueError("Sadece bekleyen izin talepleri düzenlenebilir.")
        merged = {
            k: data[k] if data.get(k) is not None else current.get(k)
            for k in ("leave_type", "start_date", "end_date", "reason")
        }
        clean = self._validate(int(current["employee_id"]), merged, leave_id=leave_id)
        self.db.leaves.update(leave_id, clean)
        self.audit(actor, "update", "leave", leave_id, clean, current["company_id"])
        return self.get(leave_id)

    def _decide(self, leave_id: int, status: str, actor: Optional[str], reason: str = "") -> dict:
        current = self.get(leave_id)
        if current["status"] != "pending":
            raise ValueError("Sadece bekleyen izin talepleri onaylanabilir veya reddedilebilir.")
        self.db.leaves.set_status(leave_id, status, approved_by=actor or "", rejection_reason=reason)
        self.audit(actor, status, "leave", leave_id, {"reason": reason} if reason else None, current["company_id"])

        updated = self.get(leave_id)
        if current.get("employee_user_id"):
            if status == "approved":
                self.notifications.notify(
                    current["employee_user_id"],
                    "İzin Talebiniz Onaylandı",
                    f"{fmt_tr_date(updated['start_date'])} - {fmt_tr_date(updated['end_date'])} tarihli izniniz onaylandı.",
                    "success",
                )
            else:
                msg = f"{fmt_tr_date(updated['start_date'])} - {fmt_tr_date(updated['end_date'])} tarihli izniniz reddedildi."
                if reason:
                    msg += f" Gerekçe: {reason}"
                self.notifications.notify(current["employee_user_id"], "İzin Talebiniz Reddedildi", msg, "warning")
        return updated

    def approve(self, leave_id: int, actor: Optional[str] = None) -> dict:
        return self._decide(leave_id, "approved", actor)

    def reject(self, leave_id: int, reason: str = "", actor: Optional[str] = None) -> dict:
        return self._decide(leave_id, "rejected", actor, clean_text(reason))

    def cancel(self, leave_id: int, actor: Optional[str] = None) -> dict:
        current = self.get(leave_id)
        if current["status"] not in _ACTIVE:
            raise ValueError("Bu izin talebi iptal edilemez.")
        if current["status"] == "approved" and current["start_date"] <= date.today().isoformat():
            raise ValueError("Başlamış bir izin iptal edilemez.")
        self.db.leaves.set_status(leave_id, "cancelled", approved_by=current.get("approved_by") or "")
        self.audit(actor, "cancel", "leave", leave_id, None, current["company_id"])
        return self.get(leave_id)

    def delete(self, leave_id: int, actor: Optional[str] = None) -> None:
        current = self.get(leave_id)
        self.db.leaves.delete(leave_id)
        self.audit(actor, "delete", "leave", leave_id, None, current["company_id"])

    def balance(self, employee_id: int, year: Optional[int] = None) -> dict:
        self._found(self.db.employees.get(employee_id), "Personel bulunamadı.")
        year = int(year or date.today().year)
        used = self.db.leaves.used_days(employee_id, "annual", year)
        return {
            "employee_id": int(employee_id),
            "year": year,
            "entitlement": self.annual_days,
            "used": used,
            "remaining": max(0, self.annual_days - used),
        }
