# -*- coding: utf-8 -*-
"""İKPro yapılandırması.

- Varsayılanlar bu dosyada.
- Aynı klasördeki `ikpro.ini` ile override edebilirsin.
- `IKPRO_HOME` environment variable set edersen, data/log dosyaları oraya yazılır.
- `IKPRO_CORS_ORIGINS` ile izin verilen origin listesi (virgülle) değiştirilebilir.
"""

from __future__ import annotations

import os
import sys
from configparser import ConfigParser
from typing import List


# -----------------
# Uygulama
# -----------------
APP_TITLE = "İKPro İnsan Kaynakları"
APP_DESCRIPTION = "İnsan kaynakları yönetimi REST servisi"

# -----------------
# Varsayılanlar
# -----------------
DEFAULT_DB_FILENAME = "ikpro.db"
DEFAULT_DATA_DIRNAME = "ik_data"
DEFAULT_DOCUMENTS_DIRNAME = "documents"
DEFAULT_LOG_DIRNAME = "logs"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_UPLOAD_MAX_MB = 10
DEFAULT_ANNUAL_LEAVE_DAYS = 14
DEFAULT_CURRENCY = "TRY"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"

LEAVE_TYPES = {
    "annual": "Yıllık İzin",
    "sick": "Hastalık İzni",
    "personal": "Mazeret İzni",
    "maternity": "Doğum İzni",
    "paternity": "Babalık İzni",
    "emergency": "Acil Durum İzni",
}

USER_ROLES = {
    "owner": "Patron",
    "admin": "Admin",
    "hr_manager": "İK Müdürü",
    "hr_specialist": "İK Uzmanı",
    "department_manager": "Departman Müdürü",
    "employee": "Çalışan",
}

# Yeni izin talebi bildirimleri bu rollerdeki kullanıcılara gider
HR_NOTIFY_ROLES = ("hr_manager", "hr_specialist")


# -----------------
# Base dir
# -----------------
def _guess_app_base_dir() -> str:
    env_home = os.environ.get("IKPRO_HOME")
    if env_home:
        return os.path.abspath(env_home)

    p = os.path.abspath(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    d = os.path.dirname(p) if p else ""
    return d if d and os.path.isdir(d) else os.getcwd()

APP_BASE_DIR = _guess_app_base_dir()

# -----------------
# INI override
# -----------------
CONFIG_FILENAME = "ikpro.ini"
CONFIG_PATH = os.path.join(APP_BASE_DIR, CONFIG_FILENAME)
_cfg = ConfigParser()
if os.path.exists(CONFIG_PATH):
    _cfg.read(CONFIG_PATH, encoding="utf-8")

DB_FILENAME = _cfg.get("db", "db_filename", fallback=DEFAULT_DB_FILENAME)
DATA_DIRNAME = _cfg.get("paths", "data_dir", fallback=DEFAULT_DATA_DIRNAME)
DOCUMENTS_DIRNAME = _cfg.get("paths", "documents_dir", fallback=DEFAULT_DOCUMENTS_DIRNAME)
LOG_DIRNAME = _cfg.get("logging", "log_dir", fallback=DEFAULT_LOG_DIRNAME)
LOG_LEVEL = _cfg.get("logging", "level", fallback=DEFAULT_LOG_LEVEL)
HOST = _cfg.get("server", "host", fallback=DEFAULT_HOST)
PORT = _cfg.getint("server", "port", fallback=DEFAULT_PORT)
UPLOAD_MAX_MB = _cfg.getint("upload", "max_mb", fallback=DEFAULT_UPLOAD_MAX_MB)
ANNUAL_LEAVE_DAYS = _cfg.getint("hr", "annual_leave_days", fallback=DEFAULT_ANNUAL_LEAVE_DAYS)
CURRENCY = _cfg.get("hr", "currency", fallback=DEFAULT_CURRENCY)

DATA_DIR = os.path.join(APP_BASE_DIR, DATA_DIRNAME)
DB_PATH = os.path.join(DATA_DIR, DB_FILENAME)
DOCUMENTS_DIR = os.path.join(DATA_DIR, DOCUMENTS_DIRNAME)
UPLOAD_MAX_BYTES = UPLOAD_MAX_MB * 1024 * 1024


def cors_origins() -> List[str]:
    raw = os.environ.get("IKPRO_CORS_ORIGINS") or _cfg.get("server", "cors_origins", fallback=DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]
