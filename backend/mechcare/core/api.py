# backend/mechcare/core/api.py
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mechcare.core.errors import MechCareError

logger = logging.getLogger(__name__)


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


def _envelope(success: bool, key: str, value: Any, meta: Optional[Dict[str, Any]], status_code: int) -> UTF8JSONResponse:
    body: Dict[str, Any] = {"ok": success, key: value}
    # boş meta yazılmaz
    if meta:
        body["meta"] = meta
    return UTF8JSONResponse(content=body, status_code=status_code)


def ok(data: Any = True, meta: Optional[Dict[str, Any]] = None, status_code: int = 200) -> UTF8JSONResponse:
    return _envelope(True, "data", data, meta, status_code)


def fail(error: str, status_code: int = 400, meta: Optional[Dict[str, Any]] = None) -> UTF8JSONResponse:
    return _envelope(False, "error", error, meta, status_code)


def install_error_envelope(app: FastAPI) -> None:
    """MechCareError, HTTP ve doğrulama hatalarını ``{ok: false, error}`` zarfına çevirir."""

    @app.exception_handler(MechCareError)
    async def mechcare_error(request: Request, exc: MechCareError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return fail(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)

    # gövde/sorgu doğrulaması: 422 yerine 400, alan detayları meta.errors altında
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return fail("Validation error", status_code=400, meta={"errors": jsonable_encoder(exc.errors())})
