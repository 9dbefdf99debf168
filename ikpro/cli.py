# -*- coding: utf-8 -*-
"""Komut satırı: sunucuyu başlatma ve self-check."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import APP_BASE_DIR, HOST, LOG_DIRNAME, LOG_LEVEL, PORT


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    from .core.logging import setup_logging

    log_path = setup_logging(APP_BASE_DIR, LOG_DIRNAME, LOG_LEVEL)
    logging.getLogger("ikpro").info("Log dosyası: %s", log_path or "-")
    uvicorn.run(
        "ikpro.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )
    return 0


def _check(args: argparse.Namespace) -> int:
    from .self_check import run_checks

    results = run_checks()
    failed = [r for r in results if not r.ok]
    for res in results:
        status = "OK" if res.ok else "FAIL"
        detail = f" - {res.detail}" if res.detail else ""
        print(f"[{status}] {res.name}{detail}")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ikpro", description="İKPro insan kaynakları servisi")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="REST API sunucusunu başlat")
    serve.add_argument("--host", default=HOST)
    serve.add_argument("--port", type=int, default=PORT)
    serve.add_argument("--reload", action="store_true", help="Geliştirme için otomatik yeniden yükleme")
    serve.set_defaults(func=_serve)

    check = sub.add_parser("check", help="Hızlı doğrulama (DB, servisler)")
    check.set_defaults(func=_check)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        # Komut verilmezse sunucu başlar
        args = parser.parse_args(["serve", *(argv or [])])
    return args.func(args)
