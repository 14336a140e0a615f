"""Clear store use case."""

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import MaintenanceService


class ClearStoreUseCase(BaseUseCase):
    """Use case for wiping every thread and post."""

    def __init__(self, maintenance_service: MaintenanceService) -> None:
        self.maintenance_service = maintenance_service

    async def execute(self, request: None = None) -> str:
        await self.maintenance_service.clear()
        return "OK"
