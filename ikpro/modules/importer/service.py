# -*- coding: utf-8 -*-

from __future__ import annotations

import io
from typing import Any, Dict, List, Optional

from ...config import UPLOAD_MAX_BYTES
from ...services.base import BaseService
from ...services.department_service import DepartmentService
from ...services.employee_service import EmployeeService
from ...services.export_service import ExportService
from .reader import read_table
from .schema import EMPLOYEE_FIELDS, EMPLOYEE_SAMPLE, sample_row
from .validator import ValidationResult, validate_rows

IMPORT_MODES = ("create", "update", "upsert")


class EmployeeImportService(BaseService):
    logger_name = "ikpro.importer"

    def __init__(
        self,
        db,
        employees: EmployeeService,
        departments: DepartmentService,
        exporter: ExportService,
        max_bytes: int = UPLOAD_MAX_BYTES,
    ):
        super().__init__(db)
        self.employees = employees
        self.departments = departments
        self.exporter = exporter
        self.max_bytes = int(max_bytes)
        self.fields = EMPLOYEE_FIELDS

    def field_descriptions(self) -> List[Dict[str, Any]]:
        return [f.to_dict() for f in self.fields]

    def template_xlsx(self) -> bytes:
        buf = io.BytesIO()
        self.exporter.export_import_template_xlsx(self.fields, sample_row(self.fields, EMPLOYEE_SAMPLE), buf)
        return buf.getvalue()

    def validate_file(self, filename: str, content: bytes) -> ValidationResult:
        sheet = read_table(filename, content, max_bytes=self.max_bytes)
        result = validate_rows(sheet.rows, self.fields, headers=sheet.headers)
        self.logger.info(
            "import validate %s: %s rows, %s errors", filename, result.total_rows, len(result.errors)
        )
        return result

    def _payload(self, company_id: int, row: Dict[str, Any], department_id: int) -> Dict[str, Any]:
        data = {
            "company_id": company_id,
            "first_name": row["first_name"],
            "last_name": row["last_name"],
            "email": row["email"],
            "position": row["position"],
            "start_date": row["start_date"],
            "salary": row["salary"],
            "department_id": department_id,
        }
        if row.get("phone"):
            data["phone"] = row["phone"]
        if row.get("status"):
            data["status"] = row["status"]
        return data

    def import_file(
        self,
        company_id: int,
        filename: str,
        content: bytes,
        mode: str = "create",
        skip_duplicates: bool = True,
        actor: Optional[str] = None,
    ) -> Dict[str, Any]:
        if mode not in IMPORT_MODES:
            raise ValueError("Geçersiz içe aktarım modu.")
        self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")

        validation = self.validate_file(filename, content)
        errors: List[Dict[str, Any]] = validation.to_dict()["errors"]
        warnings: List[str] = list(validation.warnings)
        created = updated = skipped = 0

        for row in validation.data:
            row_no = row["row"]
            existing = self.db.employees.get_by_email(company_id, row["email"])
            if existing is not None and mode == "create":
                if skip_duplicates:
                    skipped += 1
                    continue
                errors.append({"row": row_no, "field": "E-posta", "value": row["email"],
                               "message": "Bu e-posta ile kayıtlı bir personel zaten var."})
                continue
            if existing is None and mode == "update":
                if skip_duplicates:
                    skipped += 1
                    continue
                errors.append({"row": row_no, "field": "E-posta", "value": row["email"],
                               "message": "Güncellenecek personel bulunamadı."})
                continue

            try:
                dept, is_new = self.departments.ensure(company_id, row["department"], actor=actor)
                if is_new:
                    warnings.append(f"Departman oluşturuldu: {dept['name']}")
                payload = self._payload(company_id, row, int(dept["id"]))
                if existing is not None:
                    self.employees.update(int(existing["id"]), payload, actor=actor)
                    updated += 1
                else:
                    self.employees.create(payload, actor=actor)
                    created += 1
            except ValueError as exc:
                errors.append({"row": row_no, "field": "", "value": row.get("email"), "message": str(exc)})

        self.audit(
            actor,
            "import",
            "employee",
            None,
            {"file": filename, "mode": mode, "created": created, "updated": updated, "skipped": skipped,
             "errors": len(errors)},
            company_id,
        )
        return {
            "mode": mode,
            "total_rows": validation.total_rows,
            "created": created,
            "updated": updated,
            "skipped": skipped,
            "errors": sorted(errors, key=lambda e: e["row"]),
            "warnings": warnings,
        }
