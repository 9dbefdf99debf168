# -*- coding: utf-8 -*-

from __future__ import annotations

import io
from typing import List, Optional

from ..core.errors import ConflictError
from ..utils import MONTH_RE, current_month, parse_number_strict, today_iso
from .base import BaseService, optional_date, rows_to_dicts
from .export_service import ExportService

PAYROLL_STATUSES = {
    "pending": "Beklemede",
    "paid": "Ödendi",
    "cancelled": "İptal",
}


def calc_net(base_salary: float, bonuses: float, deductions: float) -> float:
    net = round(float(base_salary) + float(bonuses) - float(deductions), 2)
    if net < 0:
        raise ValueError("Kesintiler net maaşı negatife düşüremez.")
    return net


def _amount(v, message: str, default: Optional[float] = None) -> float:
    if v is None or (isinstance(v, str) and not v.strip()):
        if default is None:
            raise ValueError(message)
        return default
    n = parse_number_strict(v)
    if n is None or n < 0:
        raise ValueError(message)
    return round(n, 2)


class PayrollService(BaseService):
    logger_name = "ikpro.payroll"

    def __init__(self, db, exporter: ExportService):
        super().__init__(db)
        self.exporter = exporter

    def _decorate(self, row) -> dict:
        d = dict(row)
        d["employee_name"] = f"{d.pop('first_name', '')} {d.pop('last_name', '')}".strip()
        d["status_label"] = PAYROLL_STATUSES.get(d.get("status") or "", d.get("status"))
        return d

    def list(
        self,
        company_id: Optional[int] = None,
        month: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[dict]:
        return [self._decorate(r) for r in self.db.payroll.list(company_id, month, status)]

    def list_by_employee(self, employee_id: int) -> List[dict]:
        self._found(self.db.employees.get(employee_id), "Personel bulunamadı.")
        return [self._decorate(r) for r in self.db.payroll.list(employee_id=employee_id)]

    def get(self, payroll_id: int) -> dict:
        return self._decorate(self._found(self.db.payroll.get(payroll_id), "Bordro kaydı bulunamadı."))

    def latest_for_employee(self, employee_id: int) -> Optional[dict]:
        row = self.db.payroll.latest_for_employee(employee_id)
        return self._decorate(row) if row is not None else None

    @staticmethod
    def _month(v) -> str:
        s = str(v or "").strip()
        if not MONTH_RE.match(s):
            raise ValueError("Geçersiz dönem formatı (YYYY-AA).")
        return s

    def _amounts(self, data: dict, default_base: Optional[float]) -> dict:
        base = _amount(data.get("base_salary"), "Geçersiz brüt maaş.", default_base)
        bonuses = _amount(data.get("bonuses"), "Geçersiz prim tutarı.", 0.0)
        deductions = _amount(data.get("deductions"), "Geçersiz kesinti tutarı.", 0.0)
        return {
            "base_salary": base,
            "bonuses": bonuses,
            "deductions": deductions,
            "net_salary": calc_net(base, bonuses, deductions),
            "payment_date": optional_date(data.get("payment_date"), "Geçersiz ödeme tarihi."),
        }

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("employee_id") is None:
            raise ValueError("Personel seçimi zorunludur.")
        employee = self._found(self.db.employees.get(data["employee_id"]), "Personel bulunamadı.")
        month = self._month(data.get("month"))
        if self.db.payroll.get_for_month(employee["id"], month) is not None:
            raise ConflictError("Bu personel için bu dönemde bordro zaten var.")
        clean = self._amounts(data, default_base=float(employee["salary"] or 0))
        clean.update({"employee_id": int(employee["id"]), "month": month, "status": "pending"})
        payroll_id = self.db.payroll.create(clean)
        self.audit(actor, "create", "payroll", payroll_id, {"month": month, "net": clean["net_salary"]}, employee["company_id"])
        return self.get(payroll_id)

    def update(self, payroll_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(payroll_id)
        if current["status"] != "pending":
            raise ValueError("Sadece bekleyen bordrolar düzenlenebilir.")
        merged = {
            k: data[k] if data.get(k) is not None else current.get(k)
            for k in ("base_salary", "bonuses", "deductions", "payment_date")
        }
        clean = self._amounts(merged, default_base=float(current["base_salary"]))
        self.db.payroll.update(payroll_id, clean)
        self.audit(actor, "update", "payroll", payroll_id, {"net": clean["net_salary"]}, current["company_id"])
        return self.get(payroll_id)

    def mark_paid(self, payroll_id: int, payment_date: Optional[str] = None, actor: Optional[str] = None) -> dict:
        current = self.get(payroll_id)
        if current["status"] != "pending":
            raise ValueError("Sadece bekleyen bordrolar ödendi olarak işaretlenebilir.")
        paid_on = optional_date(payment_date, "Geçersiz ödeme tarihi.") or today_iso()
        self.db.payroll.set_status(payroll_id, "paid", paid_on)
        self.audit(actor, "pay", "payroll", payroll_id, {"payment_date": paid_on}, current["company_id"])
        return self.get(payroll_id)

    def cancel(self, payroll_id: int, actor: Optional[str] = None) -> dict:
        current = self.get(payroll_id)
        if current["status"] != "pending":
            raise ValueError("Sadece bekleyen bordrolar iptal edilebilir.")
        self.db.payroll.set_status(payroll_id, "cancelled")
        self.audit(actor, "cancel", "payroll", payroll_id, None, current["company_id"])
        return self.get(payroll_id)

    def delete(self, payroll_id: int, actor: Optional[str] = None) -> None:
        current = self.get(payroll_id)
        if current["status"] == "paid":
            raise ValueError("Ödenmiş bordro silinemez.")
        self.db.payroll.delete(payroll_id)
        self.audit(actor, "delete", "payroll", payroll_id, None, current["company_id"])

    def generate_month(self, company_id: int, month: Optional[str] = None, actor: Optional[str] = None) -> dict:
        """Şirketin aktif personeli için eksik bordroları 'pending' olarak oluşturur."""
        self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")
        month = self._month(month or current_month())
        created: List[int] = []
        skipped = 0
        for emp in self.db.employees.list(company_id=company_id, status="active"):
            if self.db.payroll.get_for_month(emp["id"], month) is not None:
                skipped += 1
                continue
            base = float(emp["salary"] or 0)
            created.append(
                self.db.payroll.create({
                    "employee_id": int(emp["id"]),
                    "month": month,
                    "base_salary": base,
                    "bonuses": 0.0,
                    "deductions": 0.0,
                    "net_salary": base,
                    "status": "pending",
                })
            )
        self.audit(actor, "generate", "payroll", month, {"created": len(created), "skipped": skipped}, company_id)
        self.logger.info("payroll %s generated for company %s: %s new", month, company_id, len(created))
        return {"month": month, "created": len(created), "skipped": skipped, "ids": created}

    def payslip_pdf(self, payroll_id: int) -> bytes:
        data = self.get(payroll_id)
        company = self.db.companies.get(data["company_id"])
        data["company_name"] = company["name"] if company else ""
        buf = io.BytesIO()
        self.exporter.export_payslip_pdf(data, buf)
        return buf.getvalue()

    def stats(self, company_id: Optional[int] = None) -> dict:
        trend = rows_to_dicts(self.db.payroll.monthly_totals(company_id))
        total = round(sum(float(t["total"]) for t in trend), 2)
        count = sum(int(t["n"]) for t in trend)
        return {
            "total_payroll": total,
            "avg_salary": round(total / count, 2) if count else 0.0,
            "monthly_payroll": round(float(trend[-1]["total"]), 2) if trend else 0.0,
            "payroll_trend": [{"month": t["month"], "amount": round(float(t["total"]), 2)} for t in trend],
        }
