"""Exception handlers mapping domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.shared.errors import DomainError, DomainErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    DomainErrorKind.INVALID_QUANTITY: 400,
    DomainErrorKind.INVALID_AMOUNT: 400,
    DomainErrorKind.INSUFFICIENT_STOCK: 409,
    DomainErrorKind.NOT_FOUND: 404,
    DomainErrorKind.INVALID_DATA: 422,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError as ``{"error": kind, "detail": message}``."""
    status_code = STATUS_BY_KIND.get(exc.kind, 400)

    logger.warning(
        "api.domain_error",
        extra={
            "kind": exc.kind.value,
            "path": request.url.path,
            "status_code": status_code,
        },
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.kind.value, "detail": exc.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
