# -*- coding: utf-8 -*-
from __future__ import annotations

import hashlib
import os
import uuid
from dataclasses import dataclass
from typing import Optional

from ...utils import safe_slug
from .constants import ALLOWED_EXTENSIONS

# Tarayıcıların bilinmeyen dosyalar için gönderdiği genel tipler
_GENERIC_MIMES = ("", "application/octet-stream")


@dataclass(frozen=True)
class StoredFile:
    file_path: str
    original_name: str
    mime: str
    size: int
    sha256: str


def ensure_safe_name(original_name: str) -> str:
    base = os.path.basename((original_name or "").replace("\\", "/"))
    if not base or base != original_name:
        raise ValueError("Geçersiz dosya adı.")
    stem, ext = os.path.splitext(base)
    ext = ext.lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise ValueError("İzin verilmeyen dosya uzantısı.")
    return f"{safe_slug(stem)}{ext}"


def check_mime(safe_name: str, declared_mime: Optional[str]) -> str:
    expected = ALLOWED_EXTENSIONS[os.path.splitext(safe_name)[1]]
    declared = (declared_mime or "").split(";", 1)[0].strip().lower()
    if declared not in _GENERIC_MIMES and declared != expected:
        raise ValueError("Dosya MIME tipi uyumsuz.")
    return expected


def safe_join(base_dir: str, *parts: str) -> str:
    candidate = os.path.abspath(os.path.join(base_dir, *parts))
    base_dir = os.path.abspath(base_dir)
    if not candidate.startswith(base_dir + os.sep):
        raise ValueError("Geçersiz dosya yolu.")
    return candidate


def store_bytes(
    base_dir: str,
    company_id: int,
    owner: str,
    content: bytes,
    original_name: str,
    declared_mime: Optional[str] = None,
    max_bytes: Optional[int] = None,
) -> StoredFile:
    safe_name = ensure_safe_name(original_name)
    mime = check_mime(safe_name, declared_mime)
    size = len(content)
    if size == 0:
        raise ValueError("Dosya boş.")
    if max_bytes is not None and size > max_bytes:
        raise ValueError("Dosya boyutu limitini aşıyor.")

    dest_root = safe_join(base_dir, str(int(company_id)), safe_slug(owner))
    os.makedirs(dest_root, exist_ok=True)
    dest_path = safe_join(dest_root, f"{uuid.uuid4().hex[:12]}_{safe_name}")
    with open(dest_path, "wb") as handle:
        handle.write(content)

    return StoredFile(
        file_path=dest_path,
        original_name=original_name,
        mime=mime,
        size=size,
        sha256=hashlib.sha256(content).hexdigest(),
    )


def resolve_stored(base_dir: str, file_path: str) -> str:
    """DB'deki yolun depolama kökü altında kaldığını doğrular."""
    path = safe_join(base_dir, os.path.relpath(file_path, os.path.abspath(base_dir)))
    if not os.path.exists(path):
        raise FileNotFoundError("Dosya bulunamadı.")
    return path
