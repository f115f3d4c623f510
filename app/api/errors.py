# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.errors import (
    CartNotFound,
    NoProductsFound,
    SourceUnavailable,
    StoreUnavailable,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)

STATUS_CODES = {
    CartNotFound: 404,
    NoProductsFound: 404,
    SourceUnavailable: 503,
    StoreUnavailable: 503,
}


def register_error_handlers(app: FastAPI) -> None:
    async def handle(request: Request, exc: Exception):
        status_code = STATUS_CODES[type(exc)]
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    for exc_type in STATUS_CODES:
        app.add_exception_handler(exc_type, handle)
