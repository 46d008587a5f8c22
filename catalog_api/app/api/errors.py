"""
Rendering of errors as JSON responses.

Every failure leaves the API in the same envelope::

    {"error": {"kind": "not_found", "message": "...", "entity": "Book", "id": 7}}

``CatalogError`` raised by a service is mapped to a status code by its
kind.  Malformed request bodies and parameters, which FastAPI rejects
before a route runs, are reported with kind ``invalid_argument`` and
status 422; their individual problems are listed under ``details``.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.app.core.errors import CatalogError, ErrorKind

logger = logging.getLogger(__name__)


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorKind.INVARIANT_VIOLATION: status.HTTP_409_CONFLICT,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


def _envelope(body: Dict[str, Any]) -> Dict[str, Any]:
    return {"error": body}


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, exc.kind.value)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(_envelope(exc.to_dict())))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"][1:]) if len(error["loc"]) > 1 else None
        details.append({"field": field, "message": error["msg"], "code": error["type"]})
    body = {
        "kind": ErrorKind.INVALID_ARGUMENT.value,
        "message": "Request validation failed",
        "entity": None,
        "id": None,
        "details": details,
    }
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(_envelope(body)),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
