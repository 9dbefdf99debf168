# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest

from ikpro.core.errors import ConflictError, NotFoundError


def test_empty_name_is_required(services, company) -> None:
    with pytest.raises(ValueError) as exc:
        services.departments.create({"company_id": company["id"], "name": ""})
    assert str(exc.value) == "Departman adı zorunludur."


def test_whitespace_name_is_required(services, company) -> None:
    with pytest.raises(ValueError, match="Departman adı zorunludur."):
        services.departments.create({"company_id": company["id"], "name": "   "})


def test_company_is_required(services) -> None:
    with pytest.raises(ValueError, match="Şirket seçimi zorunludur."):
        services.departments.create({"name": "Satış"})


def test_duplicate_name_conflicts(services, company, department) -> None:
    with pytest.raises(ConflictError):
        services.departments.create({"company_id": company["id"], "name": department["name"]})


def test_same_name_allowed_in_other_company(services, department) -> None:
    other = services.companies.create({"name": "Başka Ltd."})
    dept = services.departments.create({"company_id": other["id"], "name": department["name"]})
    assert dept["company_id"] == other["id"]


def test_update_keeps_unchanged_fields(services, department) -> None:
    services.departments.update(department["id"], {"description": "Ürün ekibi", "budget": 150000})
    updated = services.departments.update(department["id"], {"name": "Ar-Ge"})
    assert updated["name"] == "Ar-Ge"
    assert updated["description"] == "Ürün ekibi"
    assert updated["budget"] == 150000


def test_negative_budget_rejected(services, department) -> None:
    with pytest.raises(ValueError):
        services.departments.update(department["id"], {"budget": -1})


def test_manager_must_be_same_company(services, department, make_employee) -> None:
    other = services.companies.create({"name": "Başka Ltd."})
    outsider = services.employees.create({
        "company_id": other["id"],
        "first_name": "Can",
        "last_name": "Demir",
        "email": "can@baska.com",
        "position": "Müdür",
        "start_date": "2022-05-01",
    })
    with pytest.raises(ValueError):
        services.departments.update(department["id"], {"manager_id": outsider["id"]})

    manager = make_employee(position="Takım Lideri")
    updated = services.departments.update(department["id"], {"manager_id": manager["id"]})
    assert updated["manager_id"] == manager["id"]


def test_delete_refused_with_employees(services, department, make_employee) -> None:
    make_employee()
    with pytest.raises(ConflictError):
        services.departments.delete(department["id"])


def test_delete_empty_department(services, department) -> None:
    services.departments.delete(department["id"])
    with pytest.raises(NotFoundError):
        services.departments.get(department["id"])


def test_list_counts_employees(services, company, department, make_employee) -> None:
    make_employee()
    make_employee()
    rows = services.departments.list(company["id"])
    assert rows[0]["employee_count"] == 2


def test_ensure_creates_once(services, company) -> None:
    first, created = services.departments.ensure(company["id"], "Finans")
    again, created_again = services.departments.ensure(company["id"], "Finans")
    assert created is True
    assert created_again is False
    assert first["id"] == again["id"]
