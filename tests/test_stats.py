# -*- coding: utf-8 -*-
from __future__ import annotations


def test_empty_database_has_no_division_errors(services) -> None:
    emp = services.stats.employee_stats()
    assert emp == {
        "total_employees": 0,
        "active_employees": 0,
        "avg_performance_score": 0.0,
        "department_distribution": [],
    }
    assert services.stats.company_stats()["average_employees_per_company"] == 0
    assert services.stats.payroll_stats()["avg_salary"] == 0.0
    assert services.stats.department_analytics() == []

    dash = services.stats.dashboard_stats()
    assert dash["total_employees"] == 0
    assert dash["monthly_payroll"] == "₺0,00"
    assert dash["avg_performance"] == "0.0"


def test_employee_distribution_percentages(services, company, department, make_employee) -> None:
    make_employee()
    make_employee()
    make_employee(department_id=None, status="inactive")

    emp = services.stats.employee_stats(company["id"])
    assert emp["total_employees"] == 3
    assert emp["active_employees"] == 2
    by_name = {d["department"]: d for d in emp["department_distribution"]}
    assert by_name["Yazılım"]["count"] == 2
    assert by_name["Yazılım"]["percentage"] == 66.7
    assert by_name["Atanmamış"]["percentage"] == 33.3


def test_avg_score_ignores_unreviewed(services, make_employee) -> None:
    reviewed = make_employee()
    make_employee()
    services.performance.create({"employee_id": reviewed["id"], "review_period": "2024", "score": 4.5})
    assert services.stats.employee_stats()["avg_performance_score"] == 4.5
    assert services.stats.dashboard_stats()["avg_performance"] == "4.5"


def test_leave_stats_by_status_and_type(services, make_employee) -> None:
    emp = make_employee()
    a = services.leaves.create({"employee_id": emp["id"], "leave_type": "annual", "start_date": "2030-01-01", "end_date": "2030-01-02"})
    services.leaves.create({"employee_id": emp["id"], "leave_type": "sick", "start_date": "2030-02-01", "end_date": "2030-02-01"})
    services.leaves.approve(a["id"])

    stats = services.stats.leave_stats()
    assert stats["total_leaves"] == 2
    assert stats["approved_leaves"] == 1
    assert stats["pending_leaves"] == 1
    labels = {t["type"]: t["label"] for t in stats["leaves_by_type"]}
    assert labels == {"annual": "Yıllık İzin", "sick": "Hastalık İzni"}


def test_company_stats_counts_active(services, company, make_employee) -> None:
    services.companies.create({"name": "Boş Şirket"})
    make_employee()
    make_employee()
    make_employee()
    stats = services.stats.company_stats()
    assert stats["total_companies"] == 2
    assert stats["active_companies"] == 1
    assert stats["total_employees"] == 3
    assert stats["average_employees_per_company"] == 2


def test_role_dashboards(services, company, make_employee) -> None:
    emp = make_employee()
    services.leaves.create({"employee_id": emp["id"], "leave_type": "annual", "start_date": "2030-01-01", "end_date": "2030-01-03"})

    admin = services.stats.admin_dashboard(company["id"])
    assert admin["system"]["status"] == "ok"
    assert admin["recent_audit"]

    hr = services.stats.hr_manager_dashboard(company["id"])
    assert len(hr["pending_leaves"]) == 1
    assert hr["stats"]["active_leaves"] == 1

    mine = services.stats.employee_dashboard(emp["id"])
    assert mine["profile"]["id"] == emp["id"]
    assert mine["leave_balance"]["remaining"] == 14
    assert mine["latest_payslip"] is None
    assert mine["unread_notifications"] == 0


def test_distribution_keeps_same_named_departments_apart(services) -> None:
    for name in ("Birinci A.Ş.", "İkinci A.Ş."):
        comp = services.companies.create({"name": name})
        dept = services.departments.create({"company_id": comp["id"], "name": "Yazılım"})
        services.employees.create({
            "company_id": comp["id"],
            "department_id": dept["id"],
            "first_name": "Ad",
            "last_name": "Soyad",
            "email": "ad@firma.com",
            "position": "Geliştirici",
            "start_date": "2024-01-01",
        })

    rows = services.stats.employee_stats()["department_distribution"]
    assert [(r["department"], r["count"], r["percentage"]) for r in rows] == [
        ("Yazılım", 1, 50.0),
        ("Yazılım", 1, 50.0),
    ]
    assert len({r["department_id"] for r in rows}) == 2
