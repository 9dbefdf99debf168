# -*- coding: utf-8 -*-
"""Satır bazlı alan doğrulama.

Her satır, her alan için tek geçişte kontrol edilir. Hatalı satırlar `data`
listesine alınmaz; rapordaki satır numarası = indeks + 2 (başlık satırı 1).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ...utils import EMAIL_RE, is_blank, parse_date_strict, parse_number_strict
from .schema import TemplateField, match_headers


@dataclass
class RowError:
    row: int
    field: str
    value: Any
    message: str


@dataclass
class ValidationResult:
    valid: bool
    data: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    total_rows: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "total_rows": self.total_rows,
            "valid_rows": len(self.data),
            "data": self.data,
            "errors": [asdict(e) for e in self.errors],
            "warnings": list(self.warnings),
        }


def _text(v: Any) -> str:
    # Excel telefon/sicil gibi alanları float döndürebilir: 5551234567.0
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v).strip()


def _jsonable(v: Any) -> Any:
    if v is None or isinstance(v, (str, int, float, bool)):
        return v
    return str(v)


def check_value(f: TemplateField, value: Any) -> tuple[Optional[str], Any]:
    """(hata mesajı, dönüştürülmüş değer) döner; hata yoksa mesaj None."""
    if is_blank(value):
        if f.required:
            return f"{f.label} alanı zorunludur", None
        return None, None

    if f.type == "email":
        s = _text(value)
        if not EMAIL_RE.match(s):
            return "Geçersiz e-posta formatı", None
        return None, s
    if f.type == "number":
        n = parse_number_strict(value)
        if n is None:
            return "Sayısal değer bekleniyor", None
        return None, n
    if f.type == "date":
        iso = parse_date_strict(value)
        if iso is None:
            return "Geçersiz tarih formatı (YYYY-MM-DD)", None
        return None, iso
    if f.type == "select":
        s = _text(value)
        hit = next((o for o in f.options if o.lower() == s.lower()), None)
        if f.options and hit is None:
            return f"Geçersiz seçenek. Geçerli değerler: {', '.join(f.options)}", None
        return None, hit or s
    return None, _text(value)


def validate_rows(
    rows: Sequence[Dict[str, Any]],
    fields: Sequence[TemplateField],
    headers: Optional[Sequence[str]] = None,
) -> ValidationResult:
    headers = list(headers) if headers is not None else (list(rows[0].keys()) if rows else [])
    mapping, unknown = match_headers(headers, fields)

    result = ValidationResult(valid=True, total_rows=len(rows))
    if not rows:
        result.warnings.append("Dosyada veri satırı bulunamadı.")
    if unknown:
        result.warnings.append(f"Tanınmayan sütunlar yok sayıldı: {', '.join(unknown)}")
    missing = [f.label for f in fields if f.key not in mapping and f.required]
    if missing and rows:
        result.warnings.append(f"Dosyada eksik sütunlar var: {', '.join(missing)}")

    seen_emails: Dict[str, List[int]] = {}
    for index, raw in enumerate(rows):
        row_no = index + 2
        clean: Dict[str, Any] = {}
        has_error = False
        for f in fields:
            header = mapping.get(f.key)
            value = raw.get(header) if header is not None else None
            message, converted = check_value(f, value)
            if message:
                result.errors.append(RowError(row=row_no, field=f.label, value=_jsonable(value), message=message))
                has_error = True
                continue
            if converted is not None:
                clean[f.key] = converted
            if f.type == "email" and converted:
                seen_emails.setdefault(str(converted).lower(), []).append(row_no)
        if not has_error:
            clean["row"] = row_no
            result.data.append(clean)

    for email, row_nos in seen_emails.items():
        if len(row_nos) > 1:
            result.warnings.append(
                f"{email} adresi birden fazla satırda tekrar ediyor (satır {', '.join(str(n) for n in row_nos)})."
            )

    result.valid = not result.errors
    return result
