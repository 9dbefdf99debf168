# -*- coding: utf-8 -*-
from __future__ import annotations

import os
from typing import List, Optional

from ...config import DOCUMENTS_DIR, UPLOAD_MAX_BYTES
from ...core.errors import NotFoundError
from ...services.base import BaseService, clean_text, rows_to_dicts
from .constants import DOC_CATEGORIES
from .storage import resolve_stored, store_bytes


class DocumentService(BaseService):
    logger_name = "ikpro.documents"

    def __init__(self, db, storage_dir: Optional[str] = None, max_bytes: int = UPLOAD_MAX_BYTES):
        super().__init__(db)
        self.storage_dir = storage_dir or DOCUMENTS_DIR
        self.max_bytes = int(max_bytes)
        os.makedirs(self.storage_dir, exist_ok=True)

    def categories(self) -> List[str]:
        return list(DOC_CATEGORIES)

    def list(
        self,
        company_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        category: Optional[str] = None,
    ) -> List[dict]:
        return rows_to_dicts(self.db.documents.list(company_id, employee_id, category))

    def get(self, doc_id: int) -> dict:
        row = self.db.documents.get(doc_id)
        if row is None or not row["active"]:
            raise NotFoundError("Doküman bulunamadı.")
        return dict(row)

    def upload(
        self,
        company_id: int,
        original_name: str,
        content: bytes,
        declared_mime: Optional[str] = None,
        title: str = "",
        category: str = "",
        employee_id: Optional[int] = None,
        actor: Optional[str] = None,
    ) -> dict:
        self._found(self.db.companies.get(company_id), "Şirket bulunamadı.")
        owner = "genel"
        if employee_id is not None:
            emp = self._found(self.db.employees.get(employee_id), "Personel bulunamadı.")
            if int(emp["company_id"]) != int(company_id):
                raise ValueError("Personel bu şirkete ait değil.")
            owner = f"personel_{int(employee_id)}"

        stored = store_bytes(
            self.storage_dir,
            company_id,
            owner,
            content,
            original_name,
            declared_mime=declared_mime,
            max_bytes=self.max_bytes,
        )
        doc_id = self.db.documents.create({
            "company_id": int(company_id),
            "employee_id": employee_id,
            "title": clean_text(title) or os.path.splitext(original_name)[0],
            "category": clean_text(category) or "Genel",
            "original_name": stored.original_name,
            "file_path": stored.file_path,
            "mime": stored.mime,
            "size_bytes": stored.size,
            "sha256": stored.sha256,
            "uploaded_by": actor or "",
        })
        self.audit(actor, "upload", "document", doc_id, {"name": original_name, "size": stored.size}, company_id)
        return self.get(doc_id)

    def download(self, doc_id: int) -> tuple[dict, str]:
        """(doküman, diskteki yol) döner."""
        doc = self.get(doc_id)
        try:
            path = resolve_stored(self.storage_dir, doc["file_path"])
        except FileNotFoundError as exc:
            raise NotFoundError("Dosya bulunamadı.") from exc
        return doc, path

    def delete(self, doc_id: int, actor: Optional[str] = None) -> None:
        doc = self.get(doc_id)
        self.db.documents.deactivate(doc_id)
        self.audit(actor, "delete", "document", doc_id, doc["original_name"], doc["company_id"])
