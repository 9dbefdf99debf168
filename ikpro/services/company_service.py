# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from ..utils import is_valid_email
from .base import BaseService, clean_text, require_text, rows_to_dicts

_FIELDS = ("name", "industry", "address", "phone", "email", "website", "tax_number", "description")


class CompanyService(BaseService):
    logger_name = "ikpro.companies"

    def list(self) -> List[dict]:
        return rows_to_dicts(self.db.companies.list())

    def get(self, company_id: int) -> dict:
        return self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")

    def _validate(self, data: dict) -> dict:
        clean = {k: clean_text(data.get(k)) for k in _FIELDS}
        clean["name"] = require_text(data, "name", "Şirket adı zorunludur.")
        if clean["email"] and not is_valid_email(clean["email"]):
            raise ValueError("Geçersiz e-posta formatı.")
        return clean

    def create(self, data: dict, actor: Optional[str] = None) -> dict:
        clean = self._validate(data)
        company_id = self.db.companies.create(clean)
        self.audit(actor, "create", "company", company_id, clean["name"], company_id)
        return self.get(company_id)

    def update(self, company_id: int, data: dict, actor: Optional[str] = None) -> dict:
        current = self.get(company_id)
        merged = {k: data[k] if k in data and data[k] is not None else current.get(k) for k in _FIELDS}
        clean = self._validate(merged)
        self.db.companies.update(company_id, clean)
        self.audit(actor, "update", "company", company_id, sorted(k for k in data if k in _FIELDS), company_id)
        return self.get(company_id)

    def delete(self, company_id: int, actor: Optional[str] = None) -> None:
        current = self.get(company_id)
        self.db.companies.delete(company_id)
        self.audit(actor, "delete", "company", company_id, current["name"])

    def stats(self) -> dict:
        total_companies = self.db.companies.count()
        total_employees = len(self.db.employees.list())
        avg = round(total_employees / total_companies) if total_companies else 0
        return {
            "total_companies": total_companies,
            "active_companies": self.db.companies.count_with_active_employees(),
            "total_employees": total_employees,
            "average_employees_per_company": avg,
        }
