# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..core.errors import ConflictError
from ..utils import parse_number_strict
from .base import BaseService, clean_text, optional_date, require_choice, require_text, rows_to_dicts

TRAINING_STATUSES = ("planned", "ongoing", "completed", "cancelled")
ENROLLMENT_STATUSES = ("enrolled", "completed", "cancelled")
_OPEN = ("planned", "ongoing")


class TrainingService(BaseService):
    logger_name = "ikpro.trainings"

    # -----------------
    # Programlar
    # -----------------
    def list(self, company_id: Optional[int] = None, status: Optional[str] = None) -> List[dict]:
        return rows_to_dicts(self.db.trainings.list(company_id, status))

    def get(self, training_id: int) -> dict:
        return self._found(self.db.trainings.get(training_id), "Eğitim bulunamadı.")

    def _validate(self, data: dict) -> dict:
        start = optional_date(data.get("start_date"), "Geçersiz başlangıç tarihi.")
        end = optional_date(data.get("end_date"), "Geçersiz bitiş tarihi.")
        if start and end and end < start:
            raise ValueError("Bitiş tarihi başlangıç tarihinden önce olamaz.")
        capacity = parse_number_strict(data.get("capacity") if data.get("capacity") is not None else 0)
        if capacity is None or capacity < 0 or capacity != int(capacity):
            raise ValueError("Kontenjan sıfır veya pozitif bir tam sayı olmalıdır.")
        return {
            "title": require_text(data, "title", "Eğitim adı zorunludur."),
            "description": clean_text(data.get("description")),
            "instructor": clean_text(data.get("instructor")),
            "category": clean_text(data.get("category")),
            "start_date": start,
            "end_date": end,
            "capacity": int(capacity),
            "status": require_choice(data.get("status") or "planned", TRAINING_STATUSES, "Geçersiz eğitim durumu."),
        }

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("company_id") is None:
            raise ValueError("Şirket seçimi zorunludur.")
        company_id = int(data["company_id"])
        self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")
        clean = self._validate(data)
        training_id = self.db.trainings.create(company_id, clean)
        self.audit(actor, "create", "training", training_id, clean["title"], company_id)
        self.activity("training_created", f"{clean['title']} eğitimi planlandı", training_id, actor)
        return self.get(training_id)

    def update(self, training_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(training_id)
        keys = ("title", "description", "instructor", "category", "start_date", "end_date", "capacity", "status")
        merged = {k: data[k] if k in data else current.get(k) for k in keys}
        clean = self._validate(merged)
        if clean["capacity"] and clean["capacity"] < int(current["enrolled_count"]):
            raise ValueError("Kontenjan mevcut katılımcı sayısından az olamaz.")
        self.db.trainings.update(training_id, clean)
        self.audit(actor, "update", "training", training_id, sorted(k for k in data if k in keys), current["company_id"])
        return self.get(training_id)

    def delete(self, training_id: int, actor: Optional[str] = None) -> None:
        current = self.get(training_id)
        self.db.trainings.delete(training_id)
        self.audit(actor, "delete", "training", training_id, current["title"], current["company_id"])

    # -----------------
    # Katılımlar
    # -----------------
    def enrollments(self, training_id: Optional[int] = None, employee_id: Optional[int] = None) -> List[dict]:
        if training_id is not None:
            self.get(training_id)
        if employee_id is not None:
            self._found(self.db.employees.get(employee_id), "Personel bulunamadı.")
        rows = rows_to_dicts(self.db.trainings.enrollment_list(training_id, employee_id))
        for r in rows:
            r["employee_name"] = f"{r.pop('first_name', '')} {r.pop('last_name', '')}".strip()
        return rows

    def _enrollment(self, enrollment_id: int) -> dict:
        return self._found(self.db.trainings.enrollment_get(enrollment_id), "Katılım kaydı bulunamadı.")

    def enroll(self, training_id: int, employee_id: int, actor: Optional[str] = None) -> dict:
        training = self.get(training_id)
        employee = self._found(self.db.employees.get(employee_id), "Personel bulunamadı.")
        if training["status"] not in _OPEN:
            raise ValueError("Bu eğitime kayıt alınmıyor.")
        if int(employee["company_id"]) != int(training["company_id"]):
            raise ValueError("Personel bu eğitimin şirketine ait değil.")

        existing = self.db.trainings.enrollment_find(training_id, employee_id)
        if existing is not None and existing["status"] != "cancelled":
            raise ConflictError("Personel bu eğitime zaten kayıtlı.")
        capacity = int(training["capacity"] or 0)
        if capacity and int(training["enrolled_count"]) >= capacity:
            raise ValueError("Eğitim kontenjanı dolu.")

        if existing is not None:
            enrollment_id = int(existing["id"])
            self.db.trainings.enrollment_reactivate(enrollment_id)
        else:
            enrollment_id = self.db.trainings.enrollment_create(training_id, employee_id)
        self.audit(actor, "enroll", "training", training_id, {"employee_id": employee_id}, training["company_id"])
        return self._enrollment(enrollment_id)

    def complete_enrollment(self, enrollment_id: int, score: Optional[float] = None, actor: Optional[str] = None) -> dict:
        current = self._enrollment(enrollment_id)
        if current["status"] != "enrolled":
            raise ValueError("Sadece aktif katılımlar tamamlanabilir.")
        if score is not None:
            n = parse_number_strict(score)
            if n is None or n < 0 or n > 100:
                raise ValueError("Eğitim puanı 0 ile 100 arasında olmalıdır.")
            score = round(n, 1)
        self.db.trainings.enrollment_set_status(enrollment_id, "completed", score)
        self.audit(actor, "complete", "training_enrollment", enrollment_id, {"score": score})
        return self._enrollment(enrollment_id)

    def cancel_enrollment(self, enrollment_id: int, actor: Optional[str] = None) -> dict:
        current = self._enrollment(enrollment_id)
        if current["status"] != "enrolled":
            raise ValueError("Sadece aktif katılımlar iptal edilebilir.")
        self.db.trainings.enrollment_set_status(enrollment_id, "cancelled")
        self.audit(actor, "cancel", "training_enrollment", enrollment_id)
        return self._enrollment(enrollment_id)

    def upcoming_count(self, company_id: Optional[int] = None) -> int:
        return self.db.trainings.count_by_status("planned", company_id)
