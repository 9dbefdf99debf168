# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import FileResponse

from ...services.context import Services
from ..deps import get_actor, get_services

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("")
def list_documents(
    company_id: Optional[int] = None,
    employee_id: Optional[int] = None,
    category: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return services.documents.list(company_id, employee_id, category)


@router.get("/categories")
def list_categories(services: Services = Depends(get_services)):
    return services.documents.categories()


@router.get("/{doc_id}")
def get_document(doc_id: int, services: Services = Depends(get_services)):
    return services.documents.get(doc_id)


@router.get("/{doc_id}/download")
def download_document(doc_id: int, services: Services = Depends(get_services)):
    doc, path = services.documents.download(doc_id)
    return FileResponse(path, media_type=doc["mime"], filename=doc["original_name"])


@router.post("", status_code=status.HTTP_201_CREATED)
def upload_document(
    company_id: int = Form(...),
    file: UploadFile = File(...),
    title: str = Form(""),
    category: str = Form(""),
    employee_id: Optional[int] = Form(None),
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    # Limitin bir bayt fazlası okunur; aşım servis tarafında reddedilir
    content = file.file.read(services.documents.max_bytes + 1)
    return services.documents.upload(
        company_id,
        file.filename or "",
        content,
        declared_mime=file.content_type,
        title=title,
        category=category,
        employee_id=employee_id,
        actor=actor,
    )


@router.delete("/{doc_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_document(doc_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.documents.delete(doc_id, actor=actor)
