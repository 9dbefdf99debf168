# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..core.errors import ConflictError
from .base import BaseService, clean_text, optional_number, require_text, rows_to_dicts

_FIELDS = ("name", "description", "manager_id", "budget")


class DepartmentService(BaseService):
    logger_name = "ikpro.departments"

    def list(self, company_id: Optional[int] = None) -> List[dict]:
        return rows_to_dicts(self.db.departments.list(company_id))

    def get(self, dept_id: int) -> dict:
        return self._found(self.db.departments.get(dept_id), "Departman bulunamadı.")

    def _validate(self, company_id: int, data: dict, dept_id: Optional[int] = None) -> dict:
        name = require_text(data, "name", "Departman adı zorunludur.")
        other = self.db.departments.get_by_name(company_id, name)
        if other is not None and int(other["id"]) != int(dept_id or 0):
            raise ConflictError("Bu isimde bir departman zaten var.")

        manager_id = data.get("manager_id")
        if manager_id is not None:
            manager = self.db.employees.get(manager_id)
            if manager is None or int(manager["company_id"]) != int(company_id):
                raise ValueError("Departman yöneticisi aynı şirkette kayıtlı bir personel olmalıdır.")
            manager_id = int(manager_id)

        return {
            "name": name,
            "description": clean_text(data.get("description")),
            "manager_id": manager_id,
            "budget": optional_number(data.get("budget"), "Bütçe negatif olamaz.", minimum=0),
        }

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        if data.get("company_id") is None:
            raise ValueError("Şirket seçimi zorunludur.")
        company_id = int(data["company_id"])
        self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")
        clean = self._validate(company_id, data)
        dept_id = self.db.departments.create(company_id, clean)
        self.audit(actor, "create", "department", dept_id, clean["name"], company_id)
        return self.get(dept_id)

    def ensure(self, company_id: int, name: str, actor: Optional[str] = None) -> tuple[dict, bool]:
        """İsimle departman bulur; yoksa oluşturur. (departman, yeni_mi) döner."""
        row = self.db.departments.get_by_name(company_id, name)
        if row is not None:
            return dict(row), False
        return self.create({"company_id": company_id, "name": name}, actor=actor), True

    def update(self, dept_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(dept_id)
        merged = {k: data[k] if k in data else current.get(k) for k in _FIELDS}
        clean = self._validate(int(current["company_id"]), merged, dept_id=dept_id)
        self.db.departments.update(dept_id, clean)
        self.audit(actor, "update", "department", dept_id, sorted(k for k in data if k in _FIELDS), current["company_id"])
        return self.get(dept_id)

    def delete(self, dept_id: int, actor: Optional[str] = None) -> None:
        current = self.get(dept_id)
        if self.db.departments.employee_count(dept_id):
            raise ConflictError("Departmanda kayıtlı personel var.")
        self.db.departments.delete(dept_id)
        self.audit(actor, "delete", "department", dept_id, current["name"], current["company_id"])
