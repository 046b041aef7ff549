"""User use cases."""

from .get_user import (
    GetUserActivityResponse,
    GetUserActivityUseCase,
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
)

__all__ = [
    "GetUserActivityResponse",
    "GetUserActivityUseCase",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
]
