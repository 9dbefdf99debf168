# -*- coding: utf-8 -*-
from __future__ import annotations

import os
import tempfile
import unittest

import pytest

from ikpro.core.errors import ConflictError, NotFoundError
from ikpro.db.main_db import DB
from ikpro.services.context import Services


@pytest.fixture
def user(services, company) -> dict:
    return services.users.create({
        "email": "ik@test.com",
        "first_name": "Deniz",
        "last_name": "Arslan",
        "company_id": company["id"],
        "role": "hr_manager",
        "password": "gizli123",
    })


def test_create_exposes_role_label_without_secrets(services, user) -> None:
    assert user["role_label"] == "İK Müdürü"
    assert user["is_active"] is True
    for row in (user, services.users.get(user["id"]), services.users.list()[0]):
        assert "pass_hash" not in row
        assert "salt" not in row


def test_password_stored_hashed(services, db, user) -> None:
    row = db.conn.execute("SELECT salt, pass_hash FROM users WHERE id=?", (user["id"],)).fetchone()
    assert row["salt"]
    assert row["pass_hash"] != "gizli123"
    assert len(row["pass_hash"]) == 64


def test_duplicate_email_conflicts(services, user) -> None:
    with pytest.raises(ConflictError):
        services.users.create({"email": user["email"], "password": "baska123"})


def test_invalid_role_and_email(services) -> None:
    with pytest.raises(ValueError, match="Geçersiz kullanıcı rolü."):
        services.users.create({"email": "x@test.com", "role": "superuser", "password": "gizli123"})
    with pytest.raises(ValueError, match="Geçersiz e-posta formatı."):
        services.users.create({"email": "x@test", "password": "gizli123"})
    with pytest.raises(ValueError):
        services.users.create({"email": "y@test.com", "password": "123"})


def test_short_password_leaves_profile_untouched(services, db, user) -> None:
    before = db.conn.execute("SELECT pass_hash FROM users WHERE id=?", (user["id"],)).fetchone()["pass_hash"]
    with pytest.raises(ValueError):
        services.users.update(user["id"], {"first_name": "Değişti", "password": "x"})
    assert services.users.get(user["id"])["first_name"] == "Deniz"
    after = db.conn.execute("SELECT pass_hash FROM users WHERE id=?", (user["id"],)).fetchone()["pass_hash"]
    assert after == before


def test_password_change_rehashes(services, db, user) -> None:
    before = db.conn.execute("SELECT pass_hash FROM users WHERE id=?", (user["id"],)).fetchone()["pass_hash"]
    updated = services.users.update(user["id"], {"password": "yenisifre", "phone": "0212 000 00 00"}, actor="1")
    assert updated["phone"] == "0212 000 00 00"
    after = db.conn.execute("SELECT pass_hash FROM users WHERE id=?", (user["id"],)).fetchone()["pass_hash"]
    assert after != before
    actions = [r["action"] for r in services.system.audit_logs()[:2]]
    assert actions == ["update", "password_change"]


def test_roles_listing(services) -> None:
    values = [r["value"] for r in services.users.roles()]
    assert values[0] == "owner"
    assert "employee" in values


class TestCompanies(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.db = DB(os.path.join(self._tmp.name, "ik.db"), seed=False)
        self.services = Services.build(self.db, storage_dir=os.path.join(self._tmp.name, "docs"))

    def tearDown(self) -> None:
        self.db.close()
        self._tmp.cleanup()

    def test_email_validated_when_given(self) -> None:
        with self.assertRaises(ValueError):
            self.services.companies.create({"name": "Firma", "email": "bozuk"})
        ok = self.services.companies.create({"name": "Firma", "email": ""})
        self.assertEqual(ok["email"], "")

    def test_name_required(self) -> None:
        with self.assertRaises(ValueError):
            self.services.companies.create({"name": "  "})

    def test_update_and_delete(self) -> None:
        c = self.services.companies.create({"name": "Firma", "industry": "Lojistik"})
        updated = self.services.companies.update(c["id"], {"phone": "0312 111 11 11"})
        self.assertEqual(updated["industry"], "Lojistik")
        self.services.companies.delete(c["id"])
        with self.assertRaises(NotFoundError):
            self.services.companies.get(c["id"])

    def test_stats_average(self) -> None:
        c = self.services.companies.create({"name": "Firma"})
        self.services.companies.create({"name": "Boş Firma"})
        for i in range(3):
            self.services.employees.create({
                "company_id": c["id"],
                "first_name": "Ad",
                "last_name": f"Soyad{i}",
                "email": f"p{i}@firma.com",
                "position": "Uzman",
                "start_date": "2024-01-01",
            })
        stats = self.services.companies.stats()
        self.assertEqual(stats["total_companies"], 2)
        self.assertEqual(stats["active_companies"], 1)
        self.assertEqual(stats["total_employees"], 3)
        self.assertEqual(stats["average_employees_per_company"], 2)
