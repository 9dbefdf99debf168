# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..utils import parse_number_strict, today_iso
from .base import BaseService, clean_text, require_date, require_text
from .employee_service import EmployeeService

MIN_SCORE = 0.0
MAX_SCORE = 5.0


class PerformanceService(BaseService):
    logger_name = "ikpro.performance"

    def __init__(self, db, employees: EmployeeService):
        super().__init__(db)
        self.employees = employees

    def _decorate(self, row) -> dict:
        d = dict(row)
        d["employee_name"] = f"{d.pop('first_name', '')} {d.pop('last_name', '')}".strip()
        return d

    def list(self, company_id: Optional[int] = None, employee_id: Optional[int] = None) -> List[dict]:
        return [self._decorate(r) for r in self.db.performance.list(company_id, employee_id)]

    def list_by_employee(self, employee_id: int) -> List[dict]:
        self.employees.get(employee_id)
        return self.list(employee_id=employee_id)

    def get(self, review_id: int) -> dict:
        return self._decorate(self._found(self.db.performance.get(review_id), "Performans değerlendirmesi bulunamadı."))

    @staticmethod
    def _score(v) -> float:
        n = parse_number_strict(v)
        if n is None or n < MIN_SCORE or n > MAX_SCORE:
            raise ValueError("Puan 0 ile 5 arasında olmalıdır.")
        return round(n, 1)

    def _validate(self, data: dict) -> dict:
        reviewed_by = data.get("reviewed_by")
        if reviewed_by is not None:
            self._found(self.db.users.get(reviewed_by), "Değerlendiren kullanıcı bulunamadı.")
        return {
            "review_period": require_text(data, "review_period", "Değerlendirme dönemi zorunludur."),
            "score": self._score(data.get("score")),
            "goals": clean_text(data.get("goals")),
            "achievements": clean_text(data.get("achievements")),
            "feedback": clean_text(data.get("feedback")),
            "reviewed_by": reviewed_by,
            "review_date": require_date(data.get("review_date") or today_iso(), "Geçersiz değerlendirme tarihi."),
        }

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("employee_id") is None:
            raise ValueError("Personel seçimi zorunludur.")
        employee = self.employees.get(data["employee_id"])
        clean = self._validate(data)
        clean["employee_id"] = int(employee["id"])
        review_id = self.db.performance.create(clean)
        score = self.employees.refresh_performance_score(employee["id"])
        self.audit(actor, "create", "performance", review_id, {"score": clean["score"], "average": score}, employee["company_id"])
        self.activity(
            "performance_review",
            f"{employee['first_name']} {employee['last_name']} için {clean['review_period']} değerlendirmesi girildi",
            review_id,
            actor,
        )
        return self.get(review_id)

    def update(self, review_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(review_id)
        merged = {
            k: data[k] if data.get(k) is not None else current.get(k)
            for k in ("review_period", "score", "goals", "achievements", "feedback", "reviewed_by", "review_date")
        }
        clean = self._validate(merged)
        self.db.performance.update(review_id, clean)
        self.employees.refresh_performance_score(current["employee_id"])
        self.audit(actor, "update", "performance", review_id, {"score": clean["score"]}, current["company_id"])
        return self.get(review_id)

    def delete(self, review_id: int, actor: Optional[str] = None) -> None:
        current = self.get(review_id)
        self.db.performance.delete(review_id)
        self.employees.refresh_performance_score(current["employee_id"])
        self.audit(actor, "delete", "performance", review_id, None, current["company_id"])
