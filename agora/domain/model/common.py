"""Shared base for Agora entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base for users, communities, posts, comments, votes and the logs.

    Entities are frozen; repositories store updated copies made with
    model_copy().
    """

    model_config = ConfigDict(frozen=True, validate_default=True)
