# -*- coding: utf-8 -*-
"""İKPro hızlı doğrulama (self-check)."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from typing import List

from .config import APP_BASE_DIR, LOG_DIRNAME
from .core.logging import setup_logging
from .db.main_db import DB
from .services.context import Services


@dataclass
class CheckResult:
    name: str
    ok: bool
    detail: str = ""


def run_checks(with_logging: bool = True) -> List[CheckResult]:
    results: List[CheckResult] = []
    logger = logging.getLogger("ikpro.self_check")

    if with_logging:
        try:
            log_path = setup_logging(APP_BASE_DIR, log_dirname=LOG_DIRNAME)
            results.append(CheckResult("logging", True, log_path))
        except OSError as exc:
            results.append(CheckResult("logging", False, str(exc)))

    with tempfile.TemporaryDirectory() as tmpdir:
        try:
            db = DB(os.path.join(tmpdir, "self_check.db"))
        except Exception as exc:
            logger.exception("DB self-check failed")
            results.append(CheckResult("db", False, str(exc)))
            return results
        try:
            services = Services.build(db, storage_dir=os.path.join(tmpdir, "documents"))
            health = services.system.health()
            results.append(CheckResult("db", bool(health["database"]), f"{services.companies.stats()['total_companies']} şirket"))

            template = services.importer.template_xlsx()
            results.append(CheckResult("import-template", bool(template), f"{len(template)} bayt"))
        except Exception as exc:
            logger.exception("Service self-check failed")
            results.append(CheckResult("services", False, str(exc)))
        finally:
            db.close()

    return results
