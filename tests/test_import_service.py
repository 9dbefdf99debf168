# -*- coding: utf-8 -*-
from __future__ import annotations

import io

import pytest
from openpyxl import Workbook, load_workbook

from ikpro.modules.importer.reader import read_table

HEADERS = ["Ad", "Soyad", "E-posta", "Telefon", "Departman", "Pozisyon", "İşe Başlama Tarihi", "Maaş", "Durum"]


def _xlsx(rows) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.append(HEADERS)
    for r in rows:
        ws.append(r)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def test_template_has_headers_and_help(services) -> None:
    wb = load_workbook(io.BytesIO(services.importer.template_xlsx()))
    assert wb.sheetnames == ["Şablon", "Alan Açıklamaları"]
    headers = [c.value for c in wb["Şablon"][1]]
    assert headers == HEADERS
    assert wb["Şablon"]["C2"].value == "ahmet.yilmaz@ornek.com"


def test_template_validates_clean(services) -> None:
    result = services.importer.validate_file("sablon.xlsx", services.importer.template_xlsx())
    assert result.valid is True
    assert result.total_rows == 1


def test_xlsx_with_bad_email(services) -> None:
    content = _xlsx([
        ["Ali", "Veli", "ali@firma.com", None, "Satış", "Uzman", "2024-01-15", 30000, "active"],
        ["Ece", "Su", "ece-firma.com", None, "Satış", "Uzman", "2024-01-15", 30000, "active"],
    ])
    result = services.importer.validate_file("personel.xlsx", content)
    payload = result.to_dict()
    assert payload["valid"] is False
    assert payload["valid_rows"] == 1
    assert payload["errors"] == [
        {"row": 3, "field": "E-posta", "value": "ece-firma.com", "message": "Geçersiz e-posta formatı"}
    ]


def test_import_creates_departments_and_employees(services, company) -> None:
    content = _xlsx([
        ["Ali", "Veli", "ali@firma.com", 5551112233, "Satış", "Uzman", "15.01.2024", "30.000,00", "active"],
        ["Ece", "Su", "ece@firma.com", None, "Finans", "Analist", 45306, 32000, None],
        ["Bad", "Row", "yanlis", None, "Finans", "Analist", "2024-01-15", 1, None],
    ])
    result = services.importer.import_file(company["id"], "personel.xlsx", content)
    assert result["created"] == 2
    assert result["total_rows"] == 3
    assert [e["row"] for e in result["errors"]] == [4]
    assert "Departman oluşturuldu: Satış" in result["warnings"]
    assert "Departman oluşturuldu: Finans" in result["warnings"]

    ali = services.employees.get_by_email(company["id"], "ali@firma.com")
    assert ali["salary"] == 30000
    assert ali["phone"] == "5551112233"
    assert ali["start_date"] == "2024-01-15"
    assert ali["department_name"] == "Satış"


def test_import_modes(services, company) -> None:
    first = _xlsx([["Ali", "Veli", "ali@firma.com", None, "Satış", "Uzman", "2024-01-15", 30000, None]])
    services.importer.import_file(company["id"], "p.xlsx", first)

    again = services.importer.import_file(company["id"], "p.xlsx", first)
    assert again["skipped"] == 1

    strict = services.importer.import_file(company["id"], "p.xlsx", first, skip_duplicates=False)
    assert strict["errors"][0]["message"] == "Bu e-posta ile kayıtlı bir personel zaten var."

    raised = _xlsx([["Ali", "Veli", "ali@firma.com", None, "Satış", "Kıdemli Uzman", "2024-01-15", 36000, None]])
    updated = services.importer.import_file(company["id"], "p.xlsx", raised, mode="update")
    assert updated["updated"] == 1
    ali = services.employees.get_by_email(company["id"], "ali@firma.com")
    assert ali["position"] == "Kıdemli Uzman"
    assert ali["salary"] == 36000

    with pytest.raises(ValueError):
        services.importer.import_file(company["id"], "p.xlsx", first, mode="merge")


def test_csv_semicolon(services, company) -> None:
    text = ";".join(HEADERS) + "\n" + "Can;Er;can@firma.com;;Depo;Sorumlu;2023-11-01;28.500,00;active\n"
    result = services.importer.import_file(company["id"], "liste.csv", text.encode("utf-8-sig"), mode="upsert")
    assert result["created"] == 1
    assert services.employees.get_by_email(company["id"], "can@firma.com")["salary"] == 28500


def test_reader_rejections() -> None:
    with pytest.raises(ValueError, match="Desteklenmeyen"):
        read_table("liste.ods", b"data")
    with pytest.raises(ValueError, match="Excel dosyası okunamadı."):
        read_table("bozuk.xlsx", b"bu bir excel degil")
    with pytest.raises(ValueError):
        read_table("buyuk.csv", b"a" * 20, max_bytes=10)


def test_reader_skips_blank_rows() -> None:
    content = _xlsx([[None] * len(HEADERS), ["Ali", "Veli", "ali@firma.com"]])
    sheet = read_table("x.xlsx", content)
    assert sheet.headers == HEADERS
    assert len(sheet.rows) == 1
    assert sheet.rows[0]["Ad"] == "Ali"
