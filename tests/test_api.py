# -*- coding: utf-8 -*-
from __future__ import annotations

import io
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

from ikpro.api.app import create_app


@pytest.fixture
def client(tmp_path: Path):
    app = create_app(
        db_path=str(tmp_path / "api.db"),
        storage_dir=str(tmp_path / "docs"),
        seed=False,
    )
    with TestClient(app) as c:
        yield c


@pytest.fixture
def company_id(client) -> int:
    res = client.post("/api/companies", json={"name": "API A.Ş."})
    assert res.status_code == 201
    return res.json()["id"]


@pytest.fixture
def employee(client, company_id) -> dict:
    dept = client.post("/api/departments", json={"company_id": company_id, "name": "Operasyon"}).json()
    res = client.post("/api/employees", json={
        "company_id": company_id,
        "department_id": dept["id"],
        "first_name": "Burak",
        "last_name": "Tan",
        "email": "burak@api.com",
        "position": "Planlamacı",
        "start_date": "2022-04-01",
        "salary": 38000,
    })
    assert res.status_code == 201, res.text
    return res.json()


def test_health(client) -> None:
    res = client.get("/api/system/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert res.json()["database"] is True


def test_department_empty_name_returns_required_message(client, company_id) -> None:
    res = client.post("/api/departments", json={"company_id": company_id, "name": ""})
    assert res.status_code == 400
    assert res.json() == {"message": "Departman adı zorunludur."}


def test_not_found_and_conflict_codes(client, company_id) -> None:
    assert client.get("/api/companies/999").status_code == 404
    assert client.get("/api/companies/999").json()["message"] == "Şirket bulunamadı."
    client.post("/api/departments", json={"company_id": company_id, "name": "Satış"})
    dup = client.post("/api/departments", json={"company_id": company_id, "name": "satış"})
    assert dup.status_code == 409


def test_request_validation_uses_message_body(client) -> None:
    res = client.post("/api/payroll/generate", json={"month": "2024-01"})
    assert res.status_code == 422
    assert "message" in res.json()


def test_leave_approve_leaves_pending_list(client, employee) -> None:
    created = client.post("/api/leaves", json={
        "employee_id": employee["id"],
        "leave_type": "annual",
        "start_date": "2030-08-05",
        "end_date": "2030-08-09",
    })
    assert created.status_code == 201
    leave_id = created.json()["id"]
    assert [r["id"] for r in client.get("/api/leaves/pending").json()] == [leave_id]

    res = client.post(f"/api/leaves/{leave_id}/approve", headers={"X-User-Id": "12"})
    assert res.status_code == 200
    assert res.json()["status"] == "approved"
    assert res.json()["approved_by"] == "12"
    assert client.get("/api/leaves/pending").json() == []

    again = client.post(f"/api/leaves/{leave_id}/reject", json={"reason": "Geç"})
    assert again.status_code == 400


def test_reject_without_body(client, employee) -> None:
    leave_id = client.post("/api/leaves", json={
        "employee_id": employee["id"],
        "leave_type": "sick",
        "start_date": "2030-09-01",
        "end_date": "2030-09-01",
    }).json()["id"]
    res = client.post(f"/api/leaves/{leave_id}/reject")
    assert res.status_code == 200
    assert res.json()["status"] == "rejected"


def test_payroll_pdf_download(client, company_id, employee) -> None:
    gen = client.post("/api/payroll/generate", json={"company_id": company_id, "month": "2024-09"})
    assert gen.json()["created"] == 1
    payroll_id = gen.json()["ids"][0]
    res = client.get(f"/api/payroll/{payroll_id}/payslip.pdf")
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/pdf"
    assert res.content.startswith(b"%PDF")


def test_import_validate_flags_bad_email(client) -> None:
    wb = Workbook()
    ws = wb.active
    ws.append(["Ad", "Soyad", "E-posta", "Departman", "Pozisyon", "İşe Başlama Tarihi", "Maaş"])
    ws.append(["Ali", "Veli", "ali@@firma", "Satış", "Uzman", "2024-01-15", 30000])
    buf = io.BytesIO()
    wb.save(buf)

    res = client.post(
        "/api/import/employees/validate",
        files={"file": ("personel.xlsx", buf.getvalue(), "application/octet-stream")},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["valid"] is False
    assert body["errors"][0]["field"] == "E-posta"
    assert body["errors"][0]["message"] == "Geçersiz e-posta formatı"


def test_import_and_template(client, company_id) -> None:
    tpl = client.get("/api/import/employees/template")
    assert tpl.status_code == 200
    assert tpl.content[:2] == b"PK"

    res = client.post(
        "/api/import/employees",
        data={"company_id": str(company_id), "mode": "create"},
        files={"file": ("sablon.xlsx", tpl.content, "application/octet-stream")},
    )
    assert res.status_code == 200, res.text
    assert res.json()["created"] == 1
    emps = client.get("/api/employees", params={"company_id": company_id}).json()
    assert [e["email"] for e in emps] == ["ahmet.yilmaz@ornek.com"]

    fields = client.get("/api/import/employees/fields").json()
    assert fields[2] == {"key": "email", "label": "E-posta", "required": True, "type": "email", "options": []}


def test_unsupported_import_file(client, company_id) -> None:
    res = client.post(
        "/api/import/employees/validate",
        files={"file": ("liste.txt", b"Ad\nAli\n", "text/plain")},
    )
    assert res.status_code == 400
    assert "Desteklenmeyen" in res.json()["message"]


def test_notifications_require_user_header(client) -> None:
    assert client.get("/api/notifications").status_code == 400
    client.post("/api/notifications", json={"user_id": "3", "title": "Selam", "message": "Hoş geldin"})
    res = client.get("/api/notifications/unread-count", headers={"X-User-Id": "3"})
    assert res.json() == {"count": 1}
    assert client.put("/api/notifications/read-all", headers={"X-User-Id": "3"}).json() == {"updated": 1}


def test_messages_inbox(client) -> None:
    sent = client.post("/api/messages", json={"to_user_id": "9", "content": "Rapor hazır"}, headers={"X-User-Id": "4"})
    assert sent.status_code == 201
    inbox = client.get("/api/messages/inbox", headers={"X-User-Id": "9"}).json()
    assert [m["id"] for m in inbox] == [sent.json()["id"]]
    assert client.get(f"/api/messages/{sent.json()['id']}", headers={"X-User-Id": "5"}).status_code == 404


def test_document_upload_and_download(client, company_id) -> None:
    up = client.post(
        "/api/documents",
        data={"company_id": str(company_id), "category": "Genel"},
        files={"file": ("not.txt", b"merhaba", "text/plain")},
    )
    assert up.status_code == 201, up.text
    doc_id = up.json()["id"]
    down = client.get(f"/api/documents/{doc_id}/download")
    assert down.status_code == 200
    assert down.content == b"merhaba"
    assert client.delete(f"/api/documents/{doc_id}").status_code == 204
    assert client.get(f"/api/documents/{doc_id}").status_code == 404


def test_dashboards(client, company_id, employee) -> None:
    dash = client.get("/api/stats/dashboard", params={"company_id": company_id}).json()
    assert dash["total_employees"] == 1
    assert client.get("/api/dashboard/admin").status_code == 200
    assert client.get("/api/dashboard/hr-manager").status_code == 200
    me = client.get(f"/api/dashboard/employee/{employee['id']}")
    assert me.status_code == 200
    assert me.json()["profile"]["email"] == "burak@api.com"
    assert client.get("/api/dashboard/employee/999").status_code == 404


def test_settings_and_audit(client, company_id) -> None:
    res = client.put(
        "/api/settings",
        json={"category": "notifications", "key": "email", "value": True},
        headers={"X-User-Id": "2"},
    )
    assert res.status_code == 200
    assert client.get("/api/settings/notifications/email", headers={"X-User-Id": "2"}).json()["value"] is True

    logs = client.get("/api/audit-logs", params={"company_id": company_id}).json()
    assert logs[0]["resource"] == "company"
    assert logs[0]["action"] == "create"
