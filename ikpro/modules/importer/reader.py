# -*- coding: utf-8 -*-

from __future__ import annotations

import csv
import io
import logging
import os
import zipfile
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

SUPPORTED_EXTENSIONS = (".xlsx", ".csv")

logger = logging.getLogger("ikpro.importer")


@dataclass
class SheetData:
    headers: List[str]
    rows: List[Dict[str, Any]]


def _is_empty_row(values: Sequence[Any]) -> bool:
    return all(v is None or str(v).strip() == "" for v in values)


def _cell(v: Any) -> Any:
    if isinstance(v, datetime):
        # Saat kısmı 00:00 ise sadece tarih
        return v.date() if (v.hour, v.minute, v.second) == (0, 0, 0) else v
    return v


def _to_sheet(raw_rows: List[Sequence[Any]]) -> SheetData:
    if not raw_rows:
        return SheetData(headers=[], rows=[])
    headers = ["" if h is None else str(h).strip() for h in raw_rows[0]]
    rows: List[Dict[str, Any]] = []
    for values in raw_rows[1:]:
        if _is_empty_row(values):
            continue
        row: Dict[str, Any] = {}
        for i, h in enumerate(headers):
            if not h:
                continue
            row[h] = _cell(values[i]) if i < len(values) else None
        rows.append(row)
    return SheetData(headers=[h for h in headers if h], rows=rows)


def _read_xlsx(content: bytes) -> SheetData:
    from openpyxl import load_workbook
    from openpyxl.utils.exceptions import InvalidFileException

    try:
        wb = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        logger.warning("Excel okunamadı: %s", exc)
        raise ValueError("Excel dosyası okunamadı.") from exc
    try:
        ws = wb.worksheets[0]
        raw = [list(r) for r in ws.iter_rows(values_only=True)]
    finally:
        wb.close()
    # Baştaki boş satırlar başlık sayılmaz
    while raw and _is_empty_row(raw[0]):
        raw.pop(0)
    return _to_sheet(raw)


def _read_csv(content: bytes) -> SheetData:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValueError("CSV dosyası UTF-8 olarak okunamadı.") from exc
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        return SheetData(headers=[], rows=[])
    first = lines[0]
    delimiter = ";" if first.count(";") > first.count(",") else ","
    reader = csv.reader(io.StringIO("\n".join(lines)), delimiter=delimiter)
    return _to_sheet([row for row in reader])


def read_table(filename: str, content: bytes, max_bytes: Optional[int] = None) -> SheetData:
    """Dosyanın ilk sayfasını okur; ilk satır başlık, tamamen boş satırlar atlanır."""
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError("Desteklenmeyen dosya türü. Sadece .xlsx ve .csv kabul edilir.")
    if max_bytes is not None and len(content) > max_bytes:
        raise ValueError(f"Dosya boyutu {max_bytes // (1024 * 1024)} MB sınırını aşıyor.")
    if ext == ".xlsx":
        return _read_xlsx(content)
    return _read_csv(content)
