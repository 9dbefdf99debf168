# -*- coding: utf-8 -*-
"""Servisler için ortak yardımcılar (audit, satır dönüşümü, alan doğrulama)."""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Iterable, List, Optional

from ..core.errors import NotFoundError
from ..db.main_db import DB
from ..utils import is_blank, parse_date_strict, parse_number_strict

SYSTEM_ACTOR = "system"


def row_to_dict(row: Optional[sqlite3.Row]) -> Optional[dict]:
    return dict(row) if row is not None else None


def rows_to_dicts(rows: Iterable[sqlite3.Row]) -> List[dict]:
    return [dict(r) for r in rows]


def clean_text(v: Any) -> str:
    return "" if v is None else str(v).strip()


def require_text(data: dict, key: str, message: str) -> str:
    # 0 gibi değerler dolu sayılır; sadece None / boş metin eksiktir
    if is_blank(data.get(key)):
        raise ValueError(message)
    return clean_text(data.get(key))


def require_date(v: Any, message: str) -> str:
    iso = parse_date_strict(v)
    if not iso:
        raise ValueError(message)
    return iso


def optional_date(v: Any, message: str) -> Optional[str]:
    if is_blank(v):
        return None
    return require_date(v, message)


def optional_number(v: Any, message: str, minimum: Optional[float] = None) -> Optional[float]:
    if is_blank(v):
        return None
    n = parse_number_strict(v)
    if n is None:
        raise ValueError(message)
    if minimum is not None and n < minimum:
        raise ValueError(message)
    return n


def decode_json(value: Any) -> Any:
    """JSON metnini çözer; JSON değilse metni olduğu gibi döner."""
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        return value


def require_choice(v: Any, choices: Iterable[str], message: str) -> str:
    s = clean_text(v)
    if s not in tuple(choices):
        raise ValueError(message)
    return s


class BaseService:
    logger_name = "ikpro"

    def __init__(self, db: DB):
        self.db = db
        self.logger = logging.getLogger(self.logger_name)

    def audit(
        self,
        actor: Optional[str],
        action: str,
        resource: str,
        resource_id: Optional[object] = None,
        details: Any = None,
        company_id: Optional[int] = None,
    ) -> None:
        if isinstance(details, (dict, list)):
            detail_text = json.dumps(details, ensure_ascii=False, default=str)
        else:
            detail_text = "" if details is None else str(details)
        self.db.activity.audit_log(
            actor or SYSTEM_ACTOR,
            action,
            resource,
            resource_id,
            detail_text,
            company_id,
        )
        self.logger.info("audit %s %s #%s by %s", action, resource, resource_id, actor or SYSTEM_ACTOR)

    def activity(
        self,
        type_: str,
        description: str,
        entity_id: Optional[int] = None,
        actor: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        self.db.activity.add_activity(
            type_,
            description,
            entity_id,
            actor or SYSTEM_ACTOR,
            json.dumps(metadata, ensure_ascii=False, default=str) if metadata else "",
        )

    @staticmethod
    def _found(row: Optional[sqlite3.Row], message: str) -> dict:
        if row is None:
            raise NotFoundError(message)
        return dict(row)
