"""Moderation use cases."""

from .flag import FlagRequest, FlagResponse, FlagUseCase
from .remove_comment import (
    RemoveCommentRequest,
    RemoveCommentResponse,
    RemoveCommentUseCase,
)
from .restrict_user import (
    BanUserUseCase,
    MuteUserUseCase,
    RestrictUserRequest,
    RestrictUserResponse,
)

__all__ = [
    "BanUserUseCase",
    "FlagRequest",
    "FlagResponse",
    "FlagUseCase",
    "MuteUserUseCase",
    "RemoveCommentRequest",
    "RemoveCommentResponse",
    "RemoveCommentUseCase",
    "RestrictUserRequest",
    "RestrictUserResponse",
]
