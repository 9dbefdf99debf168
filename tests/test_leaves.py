# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import tempfile
import unittest

from ikpro.db.main_db import DB
from ikpro.services.context import Services


class LeaveFlowTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.db = DB(os.path.join(self.tmpdir.name, "leaves.db"), seed=False)
        self.services = Services.build(self.db, storage_dir=os.path.join(self.tmpdir.name, "docs"))
        self.company_id = self.services.companies.create({"name": "İzin A.Ş."})["id"]
        self.hr_user = self.services.users.create({
            "email": "ik@izin.com",
            "password": "gizli123",
            "company_id": self.company_id,
            "role": "hr_manager",
        })
        self.emp_user = self.services.users.create({
            "email": "calisan@izin.com",
            "password": "gizli123",
            "company_id": self.company_id,
            "role": "employee",
        })
        self.employee = self.services.employees.create({
            "company_id": self.company_id,
            "user_id": self.emp_user["id"],
            "first_name": "Mehmet",
            "last_name": "Öz",
            "email": "mehmet@izin.com",
            "position": "Analist",
            "start_date": "2021-09-01",
        })

    def tearDown(self) -> None:
        self.db.close()
        self.tmpdir.cleanup()

    def _request(self, start: str = "2030-06-02", end: str = "2030-06-04", leave_type: str = "annual") -> dict:
        return self.services.leaves.create({
            "employee_id": self.employee["id"],
            "leave_type": leave_type,
            "start_date": start,
            "end_date": end,
            "reason": "Tatil",
        })

    def test_create_counts_inclusive_days(self) -> None:
        leave = self._request("2030-06-02", "2030-06-04")
        self.assertEqual(leave["days"], 3)
        self.assertEqual(leave["status"], "pending")
        self.assertEqual(leave["employee_name"], "Mehmet Öz")
        self.assertEqual(leave["leave_type_label"], "Yıllık İzin")

    def test_create_notifies_hr(self) -> None:
        self._request()
        notes = self.services.notifications.list_for_user(str(self.hr_user["id"]))
        self.assertEqual(len(notes), 1)
        self.assertEqual(notes[0]["title"], "Yeni İzin Talebi")

    def test_approve_removes_from_pending(self) -> None:
        leave = self._request()
        pending_ids = [r["id"] for r in self.services.leaves.list_pending(self.company_id)]
        self.assertIn(leave["id"], pending_ids)

        approved = self.services.leaves.approve(leave["id"], actor=str(self.hr_user["id"]))
        self.assertEqual(approved["status"], "approved")
        self.assertEqual(approved["approved_by"], str(self.hr_user["id"]))
        self.assertTrue(approved["approved_at"])

        pending_ids = [r["id"] for r in self.services.leaves.list_pending(self.company_id)]
        self.assertNotIn(leave["id"], pending_ids)

    def test_approve_notifies_employee(self) -> None:
        leave = self._request()
        self.services.leaves.approve(leave["id"])
        notes = self.services.notifications.list_for_user(str(self.emp_user["id"]))
        self.assertEqual(notes[0]["title"], "İzin Talebiniz Onaylandı")
        self.assertEqual(notes[0]["type"], "success")

    def test_reject_keeps_reason(self) -> None:
        leave = self._request()
        rejected = self.services.leaves.reject(leave["id"], "Yoğun dönem")
        self.assertEqual(rejected["status"], "rejected")
        self.assertEqual(rejected["rejection_reason"], "Yoğun dönem")
        self.assertFalse(self.services.leaves.list_pending(self.company_id))

    def test_decision_only_once(self) -> None:
        leave = self._request()
        self.services.leaves.approve(leave["id"])
        with self.assertRaises(ValueError):
            self.services.leaves.reject(leave["id"], "Geç kaldı")

    def test_overlap_rejected(self) -> None:
        self._request("2030-02-01", "2030-02-03")
        with self.assertRaises(ValueError):
            self._request("2030-02-03", "2030-02-05")

    def test_rejected_leave_does_not_block(self) -> None:
        leave = self._request("2030-02-01", "2030-02-03")
        self.services.leaves.reject(leave["id"])
        again = self._request("2030-02-02", "2030-02-04")
        self.assertEqual(again["status"], "pending")

    def test_end_before_start_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self._request("2030-03-10", "2030-03-01")

    def test_invalid_type_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self._request(leave_type="sabbatical")

    def test_update_only_pending(self) -> None:
        leave = self._request("2030-04-01", "2030-04-02")
        updated = self.services.leaves.update(leave["id"], {"end_date": "2030-04-05"})
        self.assertEqual(updated["days"], 5)
        self.services.leaves.approve(leave["id"])
        with self.assertRaises(ValueError):
            self.services.leaves.update(leave["id"], {"reason": "Değişti"})

    def test_cancel_future_approved_keeps_approval_time(self) -> None:
        leave = self._request()
        approved = self.services.leaves.approve(leave["id"])
        cancelled = self.services.leaves.cancel(leave["id"])
        self.assertEqual(cancelled["status"], "cancelled")
        self.assertEqual(cancelled["approved_at"], approved["approved_at"])

    def test_cancel_started_leave_refused(self) -> None:
        leave = self._request("2020-01-06", "2020-01-08")
        self.services.leaves.approve(leave["id"])
        with self.assertRaises(ValueError):
            self.services.leaves.cancel(leave["id"])

    def test_balance_counts_approved_annual(self) -> None:
        a = self._request("2030-05-06", "2030-05-10")
        self.services.leaves.approve(a["id"])
        self._request("2030-07-01", "2030-07-02", leave_type="sick")
        balance = self.services.leaves.balance(self.employee["id"], 2030)
        self.assertEqual(balance["entitlement"], 14)
        self.assertEqual(balance["used"], 5)
        self.assertEqual(balance["remaining"], 9)


if __name__ == "__main__":
    unittest.main()
