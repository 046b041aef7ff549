"""Exception handlers for errors raised before a handler runs.

Malformed JSON bodies and mistyped query or path parameters are rejected by
FastAPI itself; they are reported with the same 400 envelope the handlers
use.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from agora.interface.api.envelope import invalid_input
from agora.interface.error import MissingParameterError
from agora.interface.validation import ValidationIssue


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_missing_parameter_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logfire.info("Request rejected", path=request.url.path)
        return invalid_input(
            ValidationIssue(
                # Drop the leading "body" / "query" / "path" segment
                path=list(e["loc"][1:]),
                message=e["msg"],
            )
            for e in exc.errors()
        )


def _register_missing_parameter_handler(app: FastAPI) -> None:
    @app.exception_handler(MissingParameterError)
    async def missing_parameter_handler(
        request: Request, exc: MissingParameterError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message}
        )
