# -*- coding: utf-8 -*-
"""Excel/CSV ile toplu personel içe aktarımı."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile

from ...services.context import Services
from ..deps import get_actor, get_services

router = APIRouter(prefix="/import/employees", tags=["import"])

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _read_upload(file: UploadFile, services: Services) -> bytes:
    return file.file.read(services.importer.max_bytes + 1)


@router.get("/fields")
def template_fields(services: Services = Depends(get_services)):
    return services.importer.field_descriptions()


@router.get("/template")
def download_template(services: Services = Depends(get_services)):
    return Response(
        content=services.importer.template_xlsx(),
        media_type=XLSX_MIME,
        headers={"Content-Disposition": 'attachment; filename="personel_sablonu.xlsx"'},
    )


@router.post("/validate")
def validate_file(file: UploadFile = File(...), services: Services = Depends(get_services)):
    content = _read_upload(file, services)
    return services.importer.validate_file(file.filename or "", content).to_dict()


@router.post("")
def import_file(
    company_id: int = Form(...),
    file: UploadFile = File(...),
    mode: str = Form("create"),
    skip_duplicates: bool = Form(True),
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    content = _read_upload(file, services)
    return services.importer.import_file(
        company_id,
        file.filename or "",
        content,
        mode=mode,
        skip_duplicates=skip_duplicates,
        actor=actor,
    )
