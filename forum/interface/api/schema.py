"""Response envelope shared by every forum API route."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """``{"code": 0, "response": ...}`` wrapper around a successful result."""

    code: int = 0
    response: T
