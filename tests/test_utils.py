# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import date, datetime

import pytest

from ikpro.utils import (
    calc_days,
    fmt_amount,
    fmt_currency,
    hash_password,
    is_valid_email,
    norm_header,
    parse_date_strict,
    parse_number_strict,
    safe_ratio,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1234,56", 1234.56),
        ("1.234,56", 1234.56),
        ("1,234.56", 1234.56),
        ("1.234.567", 1234567.0),
        ("₺ 2.500,00", 2500.0),
        ("1.5", 1.5),
        ("750 TL", 750.0),
        (0, 0.0),
        ("abc", None),
        ("1,2,3", None),
        (True, None),
    ],
)
def test_parse_number_strict(raw, expected) -> None:
    assert parse_number_strict(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-03-15", "2024-03-15"),
        ("2024-03-15 08:30:00", "2024-03-15"),
        ("15.03.2024", "2024-03-15"),
        ("15/03/2024", "2024-03-15"),
        (45366, "2024-03-15"),
        (datetime(2024, 3, 15, 9, 0), "2024-03-15"),
        (date(2024, 3, 15), "2024-03-15"),
        ("2024-02-30", None),
        ("dün", None),
        (12, None),
    ],
)
def test_parse_date_strict(raw, expected) -> None:
    assert parse_date_strict(raw) == expected


def test_email_check() -> None:
    assert is_valid_email("a.b@firma.com.tr")
    assert not is_valid_email("a b@firma.com")
    assert not is_valid_email("firma.com")
    assert not is_valid_email(None)


def test_amount_format() -> None:
    assert fmt_amount(1234567.891) == "1.234.567,89"
    assert fmt_amount(-5) == "-5,00"
    assert fmt_currency(1500) == "₺1.500,00"
    assert fmt_currency(10, "GBP") == "10,00 GBP"
    assert fmt_currency(-500) == "-₺500,00"


def test_days_and_ratio() -> None:
    assert calc_days("2024-02-28", "2024-03-01") == 3
    assert calc_days("2024-05-01", "2024-05-01") == 1
    assert safe_ratio(1, 0) == 0.0
    assert safe_ratio(1, 3) == 33.3


def test_norm_header_folds_turkish() -> None:
    assert norm_header("  Şube   Adı ") == "sube adi"
    assert norm_header("ÜCRET") == "ucret"
    assert norm_header("İşe Başlama Tarihi") == "ise baslama tarihi"
    assert norm_header("ISE BASLAMA TARIHI") == "ise baslama tarihi"


def test_password_hash() -> None:
    h = hash_password("gizli123", "tuz")
    assert h == hash_password("gizli123", "tuz")
    assert h != hash_password("yanlis", "tuz")
    assert len(h) == 64
