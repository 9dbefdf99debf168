# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest

from ikpro.core.errors import ConflictError
from ikpro.services.payroll_service import calc_net


def test_calc_net() -> None:
    assert calc_net(40000, 2500, 1500.5) == 41000 - 0.5
    with pytest.raises(ValueError):
        calc_net(1000, 0, 1000.01)


def test_create_defaults_base_to_employee_salary(services, make_employee) -> None:
    emp = make_employee(salary=42000)
    record = services.payroll.create({
        "employee_id": emp["id"],
        "month": "2024-05",
        "bonuses": "1.500,00",
        "deductions": 500,
    })
    assert record["base_salary"] == 42000
    assert record["net_salary"] == 43000
    assert record["status"] == "pending"
    assert record["status_label"] == "Beklemede"


def test_duplicate_month_conflicts(services, make_employee) -> None:
    emp = make_employee()
    services.payroll.create({"employee_id": emp["id"], "month": "2024-05"})
    with pytest.raises(ConflictError):
        services.payroll.create({"employee_id": emp["id"], "month": "2024-05"})


@pytest.mark.parametrize("month", ["2024-13", "24-05", "Mayıs", ""])
def test_invalid_month(services, make_employee, month) -> None:
    emp = make_employee()
    with pytest.raises(ValueError):
        services.payroll.create({"employee_id": emp["id"], "month": month})


def test_pay_and_delete_rules(services, make_employee) -> None:
    emp = make_employee()
    record = services.payroll.create({"employee_id": emp["id"], "month": "2024-06"})
    paid = services.payroll.mark_paid(record["id"], "2024-06-30")
    assert paid["status"] == "paid"
    assert paid["payment_date"] == "2024-06-30"
    with pytest.raises(ValueError):
        services.payroll.update(record["id"], {"bonuses": 100})
    with pytest.raises(ValueError):
        services.payroll.delete(record["id"])


def test_cancelled_excluded_from_stats(services, make_employee) -> None:
    a = make_employee(salary=30000)
    b = make_employee(salary=50000)
    services.payroll.create({"employee_id": a["id"], "month": "2024-01"})
    services.payroll.create({"employee_id": b["id"], "month": "2024-01"})
    extra = services.payroll.create({"employee_id": a["id"], "month": "2024-02", "bonuses": 1000})
    cancelled = services.payroll.create({"employee_id": b["id"], "month": "2024-02"})
    services.payroll.cancel(cancelled["id"])

    stats = services.payroll.stats()
    assert stats["total_payroll"] == 30000 + 50000 + extra["net_salary"]
    assert stats["monthly_payroll"] == 31000
    assert [t["month"] for t in stats["payroll_trend"]] == ["2024-01", "2024-02"]
    assert stats["avg_salary"] == round(111000 / 3, 2)


def test_generate_month_skips_existing(services, company, make_employee) -> None:
    a = make_employee(salary=30000)
    make_employee(salary=35000)
    make_employee(status="inactive")
    services.payroll.create({"employee_id": a["id"], "month": "2024-03"})

    result = services.payroll.generate_month(company["id"], "2024-03")
    assert result["created"] == 1
    assert result["skipped"] == 1
    assert len(services.payroll.list(company["id"], "2024-03")) == 2


def test_payslip_pdf(services, make_employee) -> None:
    emp = make_employee()
    record = services.payroll.create({"employee_id": emp["id"], "month": "2024-07", "bonuses": 250})
    pdf = services.payroll.payslip_pdf(record["id"])
    assert pdf.startswith(b"%PDF")


def test_latest_for_employee(services, make_employee) -> None:
    emp = make_employee()
    assert services.payroll.latest_for_employee(emp["id"]) is None
    services.payroll.create({"employee_id": emp["id"], "month": "2024-01"})
    services.payroll.create({"employee_id": emp["id"], "month": "2024-02"})
    assert services.payroll.latest_for_employee(emp["id"])["month"] == "2024-02"
