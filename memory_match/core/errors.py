from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..logger import get_logger

logger = get_logger(__name__)

INVALID_BODY = "Invalid request body"
METHOD_NOT_ALLOWED = "Method not allowed"

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        detail = METHOD_NOT_ALLOWED
    else:
        detail = str(exc.detail)
    return PlainTextResponse(detail, status_code=exc.status_code, headers=getattr(exc, 'headers', None))

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return PlainTextResponse(INVALID_BODY, status_code=400)

def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
