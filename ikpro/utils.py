# -*- coding: utf-8 -*-
"""İKPro - Ortak yardımcı fonksiyonlar

Not: Bu dosya servis, içe aktarım ve PDF katmanları tarafından kullanılır.
"""

from __future__ import annotations

import hashlib
import math
import os
import re
import secrets
from datetime import date, datetime, timedelta
from typing import Any, Optional, Tuple

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def today_iso() -> str:
    return date.today().isoformat()


def now_iso() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def current_month() -> str:
    return date.today().strftime("%Y-%m")


def fmt_tr_date(iso: str) -> str:
    try:
        d = datetime.strptime(iso, "%Y-%m-%d").date()
        return d.strftime("%d.%m.%Y")
    except (TypeError, ValueError):
        return iso


def norm_header(s: str) -> str:
    # İ önce çevrilir; lower() onu "i" + U+0307 yapar
    s = (s or "").strip().replace("İ", "i").lower()
    tr_map = str.maketrans("çğıöşü", "cgiosu")
    s = s.translate(tr_map)
    s = re.sub(r"\s+", " ", s)
    return s


def is_blank(v: Any) -> bool:
    return v is None or str(v).strip() == ""


def is_valid_email(v: Any) -> bool:
    return bool(EMAIL_RE.match(str(v or "").strip()))


def parse_date_strict(v: Any) -> Optional[str]:
    """Tarihi ISO (yyyy-mm-dd) stringe çevirir; çözülemezse None döner.

    Kabul:
    - datetime/date
    - 'yyyy-mm-dd' (saat kısmı varsa atılır)
    - 'gg.aa.yyyy', 'gg/aa/yyyy', 'gg-aa-yyyy'
    - Excel seri tarihi: 30000..90000 arası (örn 45687)
    """
    if v is None:
        return None

    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()

    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return _excel_serial_to_iso(v)

    s = str(v).strip()
    if not s:
        return None

    # 1) yyyy-mm-dd (opsiyonel saat)
    m = re.fullmatch(r"(\d{4}-\d{2}-\d{2})(?:[T ].*)?", s)
    if m:
        try:
            return datetime.strptime(m.group(1), "%Y-%m-%d").date().isoformat()
        except ValueError:
            return None

    # 2) gg.aa.yyyy / gg/aa/yyyy / gg-aa-yyyy
    m = re.fullmatch(r"(\d{1,2})[./-](\d{1,2})[./-](\d{4})", s)
    if m:
        dd, mm, yyyy = m.groups()
        try:
            return date(int(yyyy), int(mm), int(dd)).isoformat()
        except ValueError:
            return None

    # 3) Excel serial (45687 / 45687.0 / 45687,0)
    if re.fullmatch(r"\d+(?:[.,]\d+)?", s):
        return _excel_serial_to_iso(float(s.replace(",", ".")))

    return None


def _excel_serial_to_iso(v: float) -> Optional[str]:
    serial = int(v)
    if 30000 <= serial <= 90000:
        base = date(1899, 12, 30)
        return (base + timedelta(days=serial)).isoformat()
    return None


def parse_number_strict(v: Any) -> Optional[float]:
    """Sayıyı ayrıştırır (TR/EN noktalama); sayı değilse None döner.

    - 1234,56 / 1234.56
    - 1.234,56 / 1,234.56
    - 1.234.567 (binlik gruplama)

    Tek başına "1.234" ondalık kabul edilir.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        f = float(v)
        return f if math.isfinite(f) else None

    s = str(v).strip().replace("\u00A0", "").replace(" ", "")
    s = s.replace("₺", "")
    s = re.sub(r"(?i)(tl|try)$", "", s)
    if not re.fullmatch(r"[-+]?\d[\d.,]*", s):
        return None

    # Hem . hem , varsa: sağdaki ondalık kabul edilir, diğeri binlik ayırıcı sayılır
    if "." in s and "," in s:
        if s.rfind(".") > s.rfind(","):
            s = s.replace(",", "")
        else:
            s = s.replace(".", "").replace(",", ".")
    elif "," in s:
        if s.count(",") > 1:
            return None
        s = s.replace(",", ".")
    elif s.count(".") > 1:
        if not re.fullmatch(r"[-+]?\d{1,3}(?:\.\d{3})+", s):
            return None
        s = s.replace(".", "")

    try:
        f = float(s)
    except ValueError:
        return None
    return f if math.isfinite(f) else None


def fmt_amount(v: Any, min_dec: int = 2, max_dec: int = 2) -> str:
    """Tutarı TR formatında gösterir: binlik '.' ve ondalık ','.

    Örn: 1234567.89 -> 1.234.567,89
    """
    x = parse_number_strict(v)
    if x is None:
        return str(v)

    neg = x < 0
    ax = abs(x)

    # Önce EN formatında (1,234,567.89) üret, sonra TR'ye çevir
    s = f"{ax:,.{max_dec}f}"
    if "." in s and max_dec > min_dec:
        s = s.rstrip("0")
        dec_len = len(s.split(".", 1)[1])
        if dec_len < min_dec:
            s = s + ("0" * (min_dec - dec_len))
        s = s.rstrip(".")

    s = s.replace(",", "X").replace(".", ",").replace("X", ".")

    if neg and ax != 0:
        s = "-" + s
    return s


def fmt_currency(v: Any, currency: str = "TRY") -> str:
    symbol = {"TRY": "₺", "TL": "₺", "USD": "$", "EUR": "€"}.get(currency.upper(), "")
    if symbol:
        amount = fmt_amount(v)
        # İşaret sembolden önce: -₺500,00
        if amount.startswith("-"):
            return f"-{symbol}{amount[1:]}"
        return f"{symbol}{amount}"
    return f"{fmt_amount(v)} {currency}"


def calc_days(start_date: str, end_date: str) -> int:
    """İki tarih arasındaki gün sayısı (başlangıç ve bitiş dahil)."""
    s = datetime.strptime(start_date, "%Y-%m-%d").date()
    e = datetime.strptime(end_date, "%Y-%m-%d").date()
    return (e - s).days + 1


def safe_ratio(part: float, total: float, ndigits: int = 1) -> float:
    if not total:
        return 0.0
    return round(part * 100.0 / total, ndigits)


def make_salt() -> str:
    return secrets.token_hex(16)


def hash_password(password: str, salt: str) -> str:
    return hashlib.sha256((salt + password).encode("utf-8")).hexdigest()


def safe_slug(s: str) -> str:
    s = (s or "").strip().lower()
    s = s.translate(str.maketrans("çğıöşü", "cgiosu"))
    s = re.sub(r"\s+", "_", s)
    s = re.sub(r"[^a-z0-9_\-]", "_", s)
    s = re.sub(r"_+", "_", s).strip("_")
    return s or "dosya"


# ==========================================================
# PDF FONT (TÜRKÇE KARAKTERLER İÇİN)
# ==========================================================
def ensure_pdf_fonts() -> Tuple[str, str]:
    """
    ReportLab standart fontları (Helvetica/Times) Türkçe karakterleri
    (ı, İ, ş, Ş, ğ, Ğ) eksik gösterir. PDF içine Unicode TTF font gömerek
    sorunu çözer.

    Dönüş: (regular_font_name, bold_font_name)
    """
    from reportlab.pdfbase import pdfmetrics
    from reportlab.pdfbase.ttfonts import TTFont

    cached = getattr(ensure_pdf_fonts, "_cached", None)
    if cached:
        return cached

    search_dirs = [os.path.dirname(__file__), os.getcwd()]
    win_fonts = os.path.join(os.environ.get("WINDIR", "C:\\Windows"), "Fonts")
    for d in [
        win_fonts,
        "/usr/share/fonts", "/usr/local/share/fonts",
        "/usr/share/fonts/truetype", "/usr/share/fonts/truetype/dejavu",
        "/Library/Fonts", os.path.expanduser("~/Library/Fonts"),
    ]:
        if os.path.isdir(d):
            search_dirs.append(d)

    def find_font_file(filenames):
        for d in search_dirs:
            for fn in filenames:
                p = os.path.join(d, fn)
                if os.path.exists(p):
                    return p
        return None

    # Öncelik: DejaVu → Arial → Liberation/Noto
    candidates = [
        ("DejaVuSans", ["DejaVuSans.ttf"], ["DejaVuSans-Bold.ttf"]),
        ("Arial", ["arial.ttf", "Arial.ttf"], ["arialbd.ttf", "Arial Bold.ttf"]),
        ("LiberationSans", ["LiberationSans-Regular.ttf"], ["LiberationSans-Bold.ttf"]),
        ("NotoSans", ["NotoSans-Regular.ttf"], ["NotoSans-Bold.ttf"]),
    ]

    for base, reg_list, bold_list in candidates:
        reg = find_font_file(reg_list)
        if not reg:
            continue
        try:
            if base not in pdfmetrics.getRegisteredFontNames():
                pdfmetrics.registerFont(TTFont(base, reg))
            bold_name = base
            bold = find_font_file(bold_list)
            if bold:
                bold_name = base + "-Bold"
                if bold_name not in pdfmetrics.getRegisteredFontNames():
                    pdfmetrics.registerFont(TTFont(bold_name, bold))
        except Exception:
            # Bozuk/okunamayan TTF: sıradaki adaya geç
            continue
        ensure_pdf_fonts._cached = (base, bold_name)
        return ensure_pdf_fonts._cached

    ensure_pdf_fonts._cached = ("Helvetica", "Helvetica-Bold")
    return ensure_pdf_fonts._cached
