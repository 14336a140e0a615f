"""Maintenance use cases."""

from .clear_store import ClearStoreUseCase
from .get_status import GetStatusUseCase, StatusResponse

__all__ = [
    "ClearStoreUseCase",
    "GetStatusUseCase",
    "StatusResponse",
]
