# -*- coding: utf-8 -*-
"""`python -m ikpro` ile sunucuyu başlatır."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
