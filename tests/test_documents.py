# -*- coding: utf-8 -*-
from __future__ import annotations

import os

import pytest

from ikpro.core.errors import NotFoundError
from ikpro.modules.documents.storage import check_mime, ensure_safe_name, safe_join

PDF = b"%PDF-1.4 sample content"


def test_upload_download_delete(services, company, make_employee) -> None:
    emp = make_employee()
    doc = services.documents.upload(
        company["id"], "sözleşme.pdf", PDF, declared_mime="application/pdf",
        category="Sözleşme", employee_id=emp["id"],
    )
    assert doc["title"] == "sözleşme"
    assert doc["size_bytes"] == len(PDF)
    assert doc["mime"] == "application/pdf"
    assert len(doc["sha256"]) == 64

    found, path = services.documents.download(doc["id"])
    with open(path, "rb") as handle:
        assert handle.read() == PDF
    assert os.path.commonpath([path, services.documents.storage_dir]) == os.path.abspath(services.documents.storage_dir)

    assert [d["id"] for d in services.documents.list(company["id"], employee_id=emp["id"])] == [doc["id"]]
    services.documents.delete(doc["id"])
    with pytest.raises(NotFoundError):
        services.documents.get(doc["id"])
    assert services.documents.list(company["id"]) == []


@pytest.mark.parametrize(
    "name, content, mime",
    [
        ("virus.exe", b"MZ", "application/octet-stream"),
        ("../kacak.pdf", PDF, "application/pdf"),
        ("bos.pdf", b"", "application/pdf"),
        ("rapor.pdf", PDF, "image/png"),
    ],
)
def test_upload_rejections(services, company, name, content, mime) -> None:
    with pytest.raises(ValueError):
        services.documents.upload(company["id"], name, content, declared_mime=mime)


def test_size_limit(services, company) -> None:
    big = b"x" * (services.documents.max_bytes + 1)
    with pytest.raises(ValueError, match="limitini"):
        services.documents.upload(company["id"], "not.txt", big, declared_mime="text/plain")


def test_storage_helpers(tmp_path) -> None:
    assert ensure_safe_name("Maaş Bordrosu.PDF") == "maas_bordrosu.pdf"
    assert check_mime("a.pdf", "application/octet-stream") == "application/pdf"
    with pytest.raises(ValueError):
        safe_join(str(tmp_path), "..", "etc")
