# -*- coding: utf-8 -*-

from __future__ import annotations

from ikpro.self_check import run_checks


def test_self_check_runs() -> None:
    results = run_checks(with_logging=False)
    assert results, "Self-check sonuç üretmedi"
    assert all(r.ok for r in results), [r for r in results if not r.ok]
    assert any(r.name == "db" for r in results)
    assert any(r.name == "import-template" for r in results)
