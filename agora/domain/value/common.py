"""Shared base for Agora value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared field by field (vote transitions, vote state)."""

    model_config = ConfigDict(frozen=True)
