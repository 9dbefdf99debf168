# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from ikpro.db.main_db import DB
from ikpro.services.context import Services


@pytest.fixture
def db(tmp_path: Path):
    database = DB(str(tmp_path / "ik_test.db"), seed=False)
    yield database
    database.close()


@pytest.fixture
def services(db: DB, tmp_path: Path) -> Services:
    return Services.build(db, storage_dir=str(tmp_path / "documents"), upload_max_bytes=1024 * 1024)


@pytest.fixture
def company(services: Services) -> dict:
    return services.companies.create({"name": "Test A.Ş.", "industry": "Bilişim"})


@pytest.fixture
def department(services: Services, company: dict) -> dict:
    return services.departments.create({"company_id": company["id"], "name": "Yazılım"})


@pytest.fixture
def make_employee(services: Services, company: dict, department: dict) -> Callable[..., dict]:
    counter = {"n": 0}

    def _make(**overrides) -> dict:
        counter["n"] += 1
        data = {
            "company_id": company["id"],
            "department_id": department["id"],
            "first_name": "Ayşe",
            "last_name": f"Kaya{counter['n']}",
            "email": f"ayse{counter['n']}@test.com",
            "position": "Geliştirici",
            "start_date": "2023-01-02",
            "salary": 40000,
        }
        data.update(overrides)
        return services.employees.create(data)

    return _make
