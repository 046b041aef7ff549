"""Schema-driven request validation.

validate() checks an arbitrary decoded JSON value against a pydantic model
and never raises: it returns Ok with the model instance, or Err with every
field-level issue found in one pass. Unknown fields are dropped and
declared defaults are filled in.

    result = validate(CreatePostRequest, payload)
    if isinstance(result, Err):
        ...  # result.issues lists every violation
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

M = TypeVar("M", bound=BaseModel)


class ValidationIssue(BaseModel):
    """A single field-level constraint violation."""

    model_config = ConfigDict(frozen=True)

    path: list[Union[str, int]]
    message: str


@dataclass(frozen=True)
class Ok(Generic[M]):
    value: M


@dataclass(frozen=True)
class Err:
    issues: tuple[ValidationIssue, ...]


ValidationResult = Union[Ok[M], Err]


def issues_from(error: ValidationError) -> tuple[ValidationIssue, ...]:
    """Flatten a pydantic error into issues, in the order pydantic found them."""
    return tuple(
        ValidationIssue(path=list(e["loc"]), message=e["msg"]) for e in error.errors()
    )


def validate(schema: type[M], data: Any) -> ValidationResult[M]:
    """Validate decoded input against a schema.

    Args:
        schema: Model declaring the accepted shape
        data: Any decoded JSON value

    Returns:
        Ok with the validated model, or Err listing every violation
    """
    if not isinstance(data, Mapping):
        received = "null" if data is None else type(data).__name__
        return Err(
            issues=(
                ValidationIssue(
                    path=[], message=f"Expected object, received {received}"
                ),
            )
        )

    try:
        return Ok(schema.model_validate(data))
    except ValidationError as e:
        return Err(issues=issues_from(e))
