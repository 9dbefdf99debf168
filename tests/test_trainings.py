# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest

from ikpro.core.errors import ConflictError


@pytest.fixture
def training(services, company):
    return services.trainings.create({
        "company_id": company["id"],
        "title": "Python Temelleri",
        "instructor": "Elif Hoca",
        "start_date": "2030-01-10",
        "end_date": "2030-01-12",
        "capacity": 2,
    })


def test_create_defaults(training) -> None:
    assert training["status"] == "planned"
    assert training["enrolled_count"] == 0


def test_title_required(services, company) -> None:
    with pytest.raises(ValueError, match="Eğitim adı zorunludur."):
        services.trainings.create({"company_id": company["id"], "title": ""})


def test_dates_ordered(services, company) -> None:
    with pytest.raises(ValueError):
        services.trainings.create({
            "company_id": company["id"],
            "title": "Excel",
            "start_date": "2030-02-10",
            "end_date": "2030-02-01",
        })


def test_capacity_and_duplicates(services, training, make_employee) -> None:
    a, b, c = make_employee(), make_employee(), make_employee()
    services.trainings.enroll(training["id"], a["id"])
    with pytest.raises(ConflictError):
        services.trainings.enroll(training["id"], a["id"])
    services.trainings.enroll(training["id"], b["id"])
    with pytest.raises(ValueError, match="kontenjanı dolu"):
        services.trainings.enroll(training["id"], c["id"])
    assert services.trainings.get(training["id"])["enrolled_count"] == 2


def test_cancel_frees_seat_and_reenroll(services, training, make_employee) -> None:
    a, b, c = make_employee(), make_employee(), make_employee()
    first = services.trainings.enroll(training["id"], a["id"])
    services.trainings.enroll(training["id"], b["id"])
    services.trainings.cancel_enrollment(first["id"])
    services.trainings.enroll(training["id"], c["id"])

    # Kontenjan yeniden doldu
    with pytest.raises(ValueError):
        services.trainings.enroll(training["id"], a["id"])


def test_complete_with_score(services, training, make_employee) -> None:
    emp = make_employee()
    enrollment = services.trainings.enroll(training["id"], emp["id"])
    with pytest.raises(ValueError):
        services.trainings.complete_enrollment(enrollment["id"], 120)
    done = services.trainings.complete_enrollment(enrollment["id"], 87.5)
    assert done["status"] == "completed"
    assert done["score"] == 87.5
    assert done["completed_at"]


def test_closed_training_refuses_enrollment(services, training, make_employee) -> None:
    services.trainings.update(training["id"], {"status": "completed"})
    with pytest.raises(ValueError):
        services.trainings.enroll(training["id"], make_employee()["id"])


def test_capacity_cannot_drop_below_enrolled(services, training, make_employee) -> None:
    services.trainings.enroll(training["id"], make_employee()["id"])
    services.trainings.enroll(training["id"], make_employee()["id"])
    with pytest.raises(ValueError):
        services.trainings.update(training["id"], {"capacity": 1})


def test_other_company_employee_refused(services, training) -> None:
    other = services.companies.create({"name": "Diğer A.Ş."})
    outsider = services.employees.create({
        "company_id": other["id"],
        "first_name": "Zeynep",
        "last_name": "Ak",
        "email": "zeynep@diger.com",
        "position": "Uzman",
        "start_date": "2020-01-01",
    })
    with pytest.raises(ValueError):
        services.trainings.enroll(training["id"], outsider["id"])
