# -*- coding: utf-8 -*-
"""Servis katmanının fırlattığı hata tipleri.

Doğrulama hataları düz ``ValueError`` olarak kalır; API katmanı aşağıdaki alt
sınıfları ayrı HTTP kodlarına eşler.
"""

from __future__ import annotations


class NotFoundError(ValueError):
    """Kayıt bulunamadı (404)."""


class ConflictError(ValueError):
    """Tekrarlanan kayıt / benzersizlik ihlali (409)."""
