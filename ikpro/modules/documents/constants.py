# -*- coding: utf-8 -*-
from __future__ import annotations

ALLOWED_EXTENSIONS = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".txt": "text/plain",
    ".png": "image/png",
    ".jpg": "image/jpeg",
}

DOC_CATEGORIES = [
    "Sözleşme",
    "Kimlik",
    "Diploma",
    "Sağlık Raporu",
    "Bordro",
    "Genel",
]
