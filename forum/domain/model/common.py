"""Shared base for forum entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Entities are never mutated in place; repositories hand back fresh
    copies (``model_copy(update=...)``) whenever a stored row changes.
    """

    model_config = ConfigDict(frozen=True)
