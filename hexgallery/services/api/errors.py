# hexgallery/services/api/errors.py
"""
Maps gallery business errors to HTTP responses.

Every error body has the same shape:

    {"error": {"code": "NOT_FOUND", "message": "...", "details": {...}}}

    NotFoundError      -> 404
    ConflictError      -> 409
    ValidationError    -> 400   (also FastAPI request validation)
    PersistenceError   -> 500
    anything else      -> 500 INTERNAL_ERROR, details hidden
"""
from __future__ import annotations

from http import HTTPStatus
from typing import Dict, Type

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hexgallery.common.logging import get_logger
from hexgallery.domain.errors import (
    ConflictError,
    GalleryError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = get_logger()

STATUS_BY_ERROR: Dict[Type[GalleryError], HTTPStatus] = {
    NotFoundError: HTTPStatus.NOT_FOUND,
    ConflictError: HTTPStatus.CONFLICT,
    ValidationError: HTTPStatus.BAD_REQUEST,
    PersistenceError: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(exc: GalleryError) -> HTTPStatus:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return HTTPStatus.INTERNAL_SERVER_ERROR


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers on `app`; call once from create_app()."""

    @app.exception_handler(GalleryError)
    async def gallery_error_handler(request: Request, exc: GalleryError) -> JSONResponse:
        status = status_for(exc)
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
        else:
            logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
        return JSONResponse(status_code=status, content=jsonable_encoder(exc.to_dict()))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")),
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("%s %s -> VALIDATION_ERROR: %s", request.method, request.url.path, errors)
        body = ValidationError("Request validation failed", errors=errors).to_dict()
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=jsonable_encoder(body))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("%s %s -> unhandled %s", request.method, request.url.path, type(exc).__name__, exc_info=exc)
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred", "details": {}}},
        )
