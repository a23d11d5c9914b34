"""
Exception handlers for FastAPI.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

logger = logging.getLogger(__name__)


def invalid_receipt_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or wrongly typed fields are a plain client error."""
    logger.warning("Rejected request to %s: %d validation errors", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": "The receipt is invalid.",
            "errors": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may carry exception instances that JSON can't encode
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
