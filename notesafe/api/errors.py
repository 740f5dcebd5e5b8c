"""Map sanitizer errors raised in endpoint code to HTTP responses.

Rejections return the same body FastAPI uses for HTTPException:
    {"detail": "<message>"}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from notesafe.config import settings
from notesafe.core.errors import ValidationError

logger = logging.getLogger("notesafe.api")


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    # Rejected content is never logged
    logger.warning("Rejected unsafe input: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=settings.UNSAFE_INPUT_STATUS_CODE,
        content={"detail": exc.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the sanitizer exception handlers on the FastAPI app."""
    app.add_exception_handler(ValidationError, _validation_error_handler)  # type: ignore[arg-type]
