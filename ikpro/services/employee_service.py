# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..core.errors import ConflictError
from ..utils import is_valid_email
from .base import (
    BaseService,
    clean_text,
    optional_number,
    require_choice,
    require_date,
    require_text,
    rows_to_dicts,
)

EMPLOYEE_STATUSES = {
    "active": "Aktif",
    "on_leave": "İzinli",
    "inactive": "Pasif",
}

_FIELDS = (
    "first_name", "last_name", "email", "phone", "department_id", "position",
    "start_date", "salary", "status", "address", "emergency_contact", "notes", "user_id",
)


class EmployeeService(BaseService):
    logger_name = "ikpro.employees"

    def list(
        self,
        company_id: Optional[int] = None,
        department_id: Optional[int] = None,
        status: Optional[str] = None,
        q: str = "",
    ) -> List[dict]:
        return rows_to_dicts(self.db.employees.list(company_id, department_id, status, q or ""))

    def list_by_department(self, department_id: int) -> List[dict]:
        self._found(self.db.departments.get(department_id), "Departman bulunamadı.")
        return self.list(department_id=department_id)

    def get(self, emp_id: int) -> dict:
        return self._found(self.db.employees.get(emp_id), "Personel bulunamadı.")

    def get_by_email(self, company_id: int, email: str) -> dict:
        return self._found(self.db.employees.get_by_email(company_id, email), "Personel bulunamadı.")

    def _validate(self, company_id: int, data: dict, emp_id: Optional[int] = None) -> dict:
        clean = {
            "first_name": require_text(data, "first_name", "Ad zorunludur."),
            "last_name": require_text(data, "last_name", "Soyad zorunludur."),
            "email": require_text(data, "email", "E-posta zorunludur."),
            "phone": clean_text(data.get("phone")),
            "position": require_text(data, "position", "Pozisyon zorunludur."),
            "start_date": require_date(data.get("start_date"), "Geçersiz işe başlama tarihi."),
            "status": require_choice(data.get("status") or "active", EMPLOYEE_STATUSES, "Geçersiz personel durumu."),
            "address": clean_text(data.get("address")),
            "emergency_contact": clean_text(data.get("emergency_contact")),
            "notes": clean_text(data.get("notes")),
            "department_id": None,
            "user_id": None,
        }
        if not is_valid_email(clean["email"]):
            raise ValueError("Geçersiz e-posta formatı.")
        other = self.db.employees.get_by_email(company_id, clean["email"])
        if other is not None and int(other["id"]) != int(emp_id or 0):
            raise ConflictError("Bu e-posta ile kayıtlı bir personel zaten var.")

        salary = optional_number(data.get("salary"), "Maaş negatif olamaz.", minimum=0)
        clean["salary"] = salary if salary is not None else 0.0

        if data.get("department_id") is not None:
            dept = self.db.departments.get(data["department_id"])
            if dept is None or int(dept["company_id"]) != int(company_id):
                raise ValueError("Departman bulunamadı.")
            clean["department_id"] = int(dept["id"])

        if data.get("user_id") is not None:
            self._found(self.db.users.get(data["user_id"]), "Kullanıcı bulunamadı.")
            clean["user_id"] = int(data["user_id"])
        return clean

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("company_id") is None:
            raise ValueError("Şirket seçimi zorunludur.")
        company_id = int(data["company_id"])
        self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")
        clean = self._validate(company_id, data)
        emp_id = self.db.employees.create(company_id, clean)
        full_name = f"{clean['first_name']} {clean['last_name']}"
        self.audit(actor, "create", "employee", emp_id, {"name": full_name, "email": clean["email"]}, company_id)
        self.activity("employee_added", f"{full_name} personel olarak eklendi", emp_id, actor)
        return self.get(emp_id)

    def update(self, emp_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(emp_id)
        merged = {k: data[k] if k in data else current.get(k) for k in _FIELDS}
        clean = self._validate(int(current["company_id"]), merged, emp_id=emp_id)
        self.db.employees.update(emp_id, clean)
        changed = sorted(k for k in data if k in _FIELDS)
        self.audit(actor, "update", "employee", emp_id, changed, current["company_id"])
        self.activity("employee_updated", f"{clean['first_name']} {clean['last_name']} bilgileri güncellendi", emp_id, actor)
        return self.get(emp_id)

    def set_status(self, emp_id: int, status: str, actor: Optional[str] = None) -> dict:
        current = self.get(emp_id)
        status = require_choice(status, EMPLOYEE_STATUSES, "Geçersiz personel durumu.")
        self.db.employees.set_status(emp_id, status)
        self.audit(actor, "set_status", "employee", emp_id, {"from": current["status"], "to": status}, current["company_id"])
        return self.get(emp_id)

    def delete(self, emp_id: int, actor: Optional[str] = None) -> None:
        current = self.get(emp_id)
        # Eski DB'lerde manager_id için FK olmayabilir
        self.db.departments.clear_manager(emp_id)
        self.db.employees.delete(emp_id)
        full_name = f"{current['first_name']} {current['last_name']}"
        self.audit(actor, "delete", "employee", emp_id, full_name, current["company_id"])
        self.activity("employee_removed", f"{full_name} personel kaydı silindi", emp_id, actor)

    def refresh_performance_score(self, emp_id: int) -> float:
        score = round(self.db.performance.average_for(emp_id), 1)
        self.db.employees.set_performance_score(emp_id, score)
        return score
