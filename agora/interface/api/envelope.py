"""Uniform success and error envelope for API handlers.

Handlers hand their work to respond() (or respond_to_validation() for
validated input) instead of raising. Whatever happens, the client gets one
of these bodies:

    2xx  the action's result
    400  {"error": "Invalid input", "details": [{"path": [...], "message": ...}]}
    403  {"error": "Forbidden"}
    404  {"error": "<Resource> not found"}
    500  {"error": "Internal server error", "details": "<message>"}
"""

from typing import Any, Awaitable, Callable, Iterable, TypeVar

import logfire
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from agora.domain.error import BusinessRuleViolationError, ForbiddenError, NotFoundError
from agora.interface.validation import Err, ValidationIssue, ValidationResult

M = TypeVar("M", bound=BaseModel)


def invalid_input(issues: Iterable[ValidationIssue]) -> JSONResponse:
    """Build the 400 response for a list of issues."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid input",
            "details": [issue.model_dump() for issue in issues],
        },
    )


def _serialize(result: Any, exclude_none: bool) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)
    return jsonable_encoder(result, exclude_none=exclude_none)


async def respond(
    action: Callable[[], Awaitable[Any]],
    status_code: int = status.HTTP_200_OK,
    exclude_none: bool = False,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Run an action and map its outcome onto the envelope.

    Args:
        action: Coroutine factory producing the success body
        status_code: Status for a successful result
        exclude_none: Drop None-valued fields from the success body
        headers: Extra headers for a successful result

    Returns:
        The JSON response; never raises for errors the action raises
    """
    try:
        result = await action()
    except NotFoundError as e:
        logfire.info("Resource not found", resource=e.resource, identifier=e.identifier)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": f"{e.resource} not found"},
        )
    except BusinessRuleViolationError as e:
        logfire.info("Business rule violated", field=e.field, message=e.message)
        return invalid_input([ValidationIssue(path=[e.field], message=e.message)])
    except ForbiddenError as e:
        logfire.warn("Forbidden", resource=e.resource, resource_id=e.resource_id)
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"error": "Forbidden"}
        )
    except Exception as e:
        logfire.exception("Unhandled error in request action")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "details": str(e)},
        )

    return JSONResponse(
        status_code=status_code,
        content=_serialize(result, exclude_none),
        headers=headers,
    )


async def respond_to_validation(
    result: ValidationResult[M],
    action: Callable[[M], Awaitable[Any]],
    status_code: int = status.HTTP_200_OK,
    exclude_none: bool = False,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Respond to validated input.

    An Err becomes a 400 without the action ever running; an Ok value is
    passed to the action and its outcome mapped as in respond().
    """
    if isinstance(result, Err):
        logfire.info("Invalid input", issues=len(result.issues))
        return invalid_input(result.issues)

    value = result.value
    return await respond(
        lambda: action(value),
        status_code=status_code,
        exclude_none=exclude_none,
        headers=headers,
    )
