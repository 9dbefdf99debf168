# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...utils import norm_header

FIELD_TYPES = ("text", "number", "date", "email", "select")


@dataclass(frozen=True)
class TemplateField:
    key: str
    label: str
    required: bool = False
    type: str = "text"
    options: Tuple[str, ...] = ()
    # Başlık eşleştirmede label/key dışında kabul edilen adlar
    aliases: Tuple[str, ...] = field(default=(), compare=False)

    def names(self) -> List[str]:
        return [norm_header(n) for n in (self.label, self.key, *self.aliases)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "required": self.required,
            "type": self.type,
            "options": list(self.options),
        }


EMPLOYEE_FIELDS: Tuple[TemplateField, ...] = (
    TemplateField("first_name", "Ad", True, "text", aliases=("isim", "adı")),
    TemplateField("last_name", "Soyad", True, "text", aliases=("soyadı", "soyisim")),
    TemplateField("email", "E-posta", True, "email", aliases=("eposta", "e-mail", "mail")),
    TemplateField("phone", "Telefon", False, "text", aliases=("tel", "gsm")),
    TemplateField("department", "Departman", True, "text", aliases=("bölüm",)),
    TemplateField("position", "Pozisyon", True, "text", aliases=("unvan", "görev")),
    TemplateField("start_date", "İşe Başlama Tarihi", True, "date", aliases=("başlama tarihi", "giriş tarihi")),
    TemplateField("salary", "Maaş", True, "number", aliases=("ücret",)),
    TemplateField("status", "Durum", False, "select", options=("active", "on_leave", "inactive")),
)

EMPLOYEE_SAMPLE: Dict[str, Any] = {
    "first_name": "Ahmet",
    "last_name": "Yılmaz",
    "email": "ahmet.yilmaz@ornek.com",
    "phone": "+90 555 123 4567",
    "department": "Bilgi Teknolojileri",
    "position": "Yazılım Geliştirici",
    "start_date": "2024-01-01",
    "salary": 45000,
    "status": "active",
}


def sample_row(fields: Sequence[TemplateField], overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Şablondaki örnek satır: tipine göre varsayılan değer, varsa override."""
    defaults = {
        "text": "Örnek Metin",
        "number": 100,
        "date": "2024-01-01",
        "email": "ornek@email.com",
    }
    out: Dict[str, Any] = {}
    for f in fields:
        if overrides and f.key in overrides:
            out[f.key] = overrides[f.key]
        elif f.type == "select":
            out[f.key] = f.options[0] if f.options else "Seçenek"
        else:
            out[f.key] = defaults.get(f.type, "Veri")
    return out


def match_headers(headers: Sequence[str], fields: Sequence[TemplateField]) -> Tuple[Dict[str, str], List[str]]:
    """Dosya başlıklarını alanlara eşler.

    Dönüş: ({field.key: header}, tanınmayan başlıklar)
    """
    mapping: Dict[str, str] = {}
    unknown: List[str] = []
    for h in headers:
        nh = norm_header(h)
        if not nh:
            continue
        hit = next((f for f in fields if f.key not in mapping and nh in f.names()), None)
        if hit is None:
            unknown.append(h)
        else:
            mapping[hit.key] = h
    return mapping, unknown
