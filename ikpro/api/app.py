# -*- coding: utf-8 -*-
"""FastAPI uygulama fabrikası.

Çalıştırma:
    uvicorn ikpro.api.app:create_app --factory --port 8000
"""

from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import APP_DESCRIPTION, APP_TITLE, DB_PATH, DOCUMENTS_DIR, cors_origins
from ..core.errors import ConflictError, NotFoundError
from ..core.logging import install_access_log_filter
from ..core.version import __version__
from ..db.main_db import DB
from ..services.context import Services
from .router import router

logger = logging.getLogger("ikpro.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("İKPro API hazır (db=%s)", app.state.db.path)
    yield
    app.state.db.close()
    logger.info("İKPro API kapandı")


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _install_error_handlers(application: FastAPI) -> None:
    """Servis hatalarını HTTP kodlarına eşler; gövde her zaman {"message": ...}."""

    @application.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return _message(status.HTTP_404_NOT_FOUND, str(exc))

    @application.exception_handler(ConflictError)
    async def _conflict(request: Request, exc: ConflictError):
        return _message(status.HTTP_409_CONFLICT, str(exc))

    @application.exception_handler(ValueError)
    async def _bad_request(request: Request, exc: ValueError):
        return _message(status.HTTP_400_BAD_REQUEST, str(exc))

    @application.exception_handler(sqlite3.IntegrityError)
    async def _integrity(request: Request, exc: sqlite3.IntegrityError):
        logger.warning("%s %s: integrity error: %s", request.method, request.url.path, exc)
        return _message(status.HTTP_409_CONFLICT, "Kayıt veritabanı kısıtlarıyla çakışıyor.")

    @application.exception_handler(RequestValidationError)
    async def _invalid(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        text = first.get("msg", "Geçersiz istek.")
        return _message(
            422,
            f"{loc}: {text}" if loc else text,
        )

    @application.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.exception("%s %s: beklenmeyen hata", request.method, request.url.path)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Sunucu hatası.")


def create_app(
    db_path: Optional[str] = None,
    storage_dir: Optional[str] = None,
    seed: bool = True,
) -> FastAPI:
    """Uygulamayı oluşturur; DB ve servisler `app.state` üzerinde tutulur."""
    db_path = db_path or DB_PATH
    storage_dir = storage_dir or DOCUMENTS_DIR
    db_dir = os.path.dirname(os.path.abspath(db_path))
    os.makedirs(db_dir, exist_ok=True)
    os.makedirs(storage_dir, exist_ok=True)

    db = DB(db_path, seed=seed)

    application = FastAPI(
        title=APP_TITLE,
        version=__version__,
        description=APP_DESCRIPTION,
        lifespan=lifespan,
    )
    application.state.db = db
    application.state.services = Services.build(db, storage_dir=storage_dir)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _install_error_handlers(application)
    application.include_router(router, prefix="/api")
    install_access_log_filter()
    return application
