# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest


def test_score_bounds(services, make_employee) -> None:
    emp = make_employee()
    for bad in (-0.1, 5.5, "çok iyi"):
        with pytest.raises(ValueError):
            services.performance.create({"employee_id": emp["id"], "review_period": "2024-Q1", "score": bad})


def test_employee_score_follows_reviews(services, make_employee) -> None:
    emp = make_employee()
    first = services.performance.create({"employee_id": emp["id"], "review_period": "2024-Q1", "score": 4})
    services.performance.create({"employee_id": emp["id"], "review_period": "2024-Q2", "score": 3})
    assert services.employees.get(emp["id"])["performance_score"] == 3.5

    services.performance.update(first["id"], {"score": 5})
    assert services.employees.get(emp["id"])["performance_score"] == 4.0

    services.performance.delete(first["id"])
    assert services.employees.get(emp["id"])["performance_score"] == 3.0


def test_review_period_required(services, make_employee) -> None:
    emp = make_employee()
    with pytest.raises(ValueError, match="Değerlendirme dönemi zorunludur."):
        services.performance.create({"employee_id": emp["id"], "score": 3})


def test_list_by_employee(services, make_employee) -> None:
    a = make_employee()
    b = make_employee()
    services.performance.create({"employee_id": a["id"], "review_period": "2024", "score": 4.26})
    services.performance.create({"employee_id": b["id"], "review_period": "2024", "score": 2})
    rows = services.performance.list_by_employee(a["id"])
    assert len(rows) == 1
    assert rows[0]["score"] == 4.3
    assert rows[0]["employee_name"] == f"{a['first_name']} {a['last_name']}"
