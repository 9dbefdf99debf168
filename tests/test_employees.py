# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest

from ikpro.core.errors import ConflictError, NotFoundError


def test_create_defaults(services, make_employee, department) -> None:
    emp = make_employee()
    assert emp["status"] == "active"
    assert emp["performance_score"] == 0
    assert emp["department_name"] == department["name"]


def test_required_fields(services, company) -> None:
    base = {
        "company_id": company["id"],
        "first_name": "Ali",
        "last_name": "Yıldız",
        "email": "ali@test.com",
        "position": "Analist",
        "start_date": "2024-01-15",
    }
    for key in ("first_name", "email", "position"):
        with pytest.raises(ValueError):
            services.employees.create({**base, key: " "})
    with pytest.raises(ValueError, match="Geçersiz e-posta formatı."):
        services.employees.create({**base, "email": "ali@test"})
    with pytest.raises(ValueError):
        services.employees.create({**base, "start_date": "2024-13-01"})
    with pytest.raises(ValueError):
        services.employees.create({**base, "salary": -1})


def test_email_unique_per_company(services, make_employee) -> None:
    emp = make_employee()
    with pytest.raises(ConflictError):
        make_employee(email=emp["email"].upper())

    other = services.companies.create({"name": "Başka Ltd."})
    again = services.employees.create({
        "company_id": other["id"],
        "first_name": "Ayşe",
        "last_name": "Kaya",
        "email": emp["email"],
        "position": "Geliştirici",
        "start_date": "2023-01-02",
    })
    assert again["company_id"] == other["id"]


def test_get_by_email(services, company, make_employee) -> None:
    emp = make_employee(email="zeynep@test.com")
    assert services.employees.get_by_email(company["id"], "ZEYNEP@test.com")["id"] == emp["id"]
    with pytest.raises(NotFoundError):
        services.employees.get_by_email(company["id"], "yok@test.com")


def test_partial_update_keeps_other_fields(services, make_employee) -> None:
    emp = make_employee(phone="0555 111 22 33", notes="Uzaktan")
    updated = services.employees.update(emp["id"], {"salary": 52000})
    assert updated["salary"] == 52000
    assert updated["phone"] == "0555 111 22 33"
    assert updated["notes"] == "Uzaktan"
    assert updated["department_id"] == emp["department_id"]


def test_set_status(services, make_employee) -> None:
    emp = make_employee()
    assert services.employees.set_status(emp["id"], "on_leave")["status"] == "on_leave"
    with pytest.raises(ValueError, match="Geçersiz personel durumu."):
        services.employees.set_status(emp["id"], "fired")


def test_search_by_name_email_position(services, company, make_employee) -> None:
    a = make_employee(first_name="Mert", last_name="Aydın", email="mert@test.com", position="Muhasebeci")
    b = make_employee(first_name="Selin", last_name="Uçar", email="selin@firma.com", position="Tasarımcı")

    def ids(q):
        return [e["id"] for e in services.employees.list(company_id=company["id"], q=q)]

    assert ids("Mert") == [a["id"]]
    assert ids("firma.com") == [b["id"]]
    assert ids("Muhasebe") == [a["id"]]
    assert ids("Selin Uçar") == [b["id"]]


def test_list_by_department(services, department, make_employee) -> None:
    emp = make_employee()
    make_employee(department_id=None)
    assert [e["id"] for e in services.employees.list_by_department(department["id"])] == [emp["id"]]
    with pytest.raises(NotFoundError):
        services.employees.list_by_department(999)


def test_delete_writes_audit_and_activity(services, make_employee) -> None:
    emp = make_employee()
    services.employees.delete(emp["id"], actor="5")
    with pytest.raises(NotFoundError):
        services.employees.get(emp["id"])
    logs = services.system.audit_logs()
    assert (logs[0]["actor"], logs[0]["action"], logs[0]["resource"]) == ("5", "delete", "employee")
    assert services.system.activities()[0]["type"] == "employee_removed"


def test_deleting_manager_clears_department_manager(services, department, make_employee) -> None:
    manager = make_employee(position="Takım Lideri")
    services.departments.update(department["id"], {"manager_id": manager["id"]})
    services.employees.update(manager["id"], {"department_id": None})
    services.employees.delete(manager["id"])

    assert services.departments.get(department["id"])["manager_id"] is None
    # Yönetici silindikten sonra kısmi güncelleme çalışmaya devam eder
    updated = services.departments.update(department["id"], {"description": "Yeni açıklama"})
    assert updated["description"] == "Yeni açıklama"


def test_company_delete_cascades(services, company, department, make_employee) -> None:
    make_employee()
    services.companies.delete(company["id"])
    assert services.employees.list() == []
    assert services.departments.list() == []
