"""Store status use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import MaintenanceService


class StatusResponse(BaseModel):
    """Row counts per table."""

    thread: int
    post: int


class GetStatusUseCase(BaseUseCase):
    """Use case for reporting how many threads and posts are stored."""

    def __init__(self, maintenance_service: MaintenanceService) -> None:
        self.maintenance_service = maintenance_service

    async def execute(self, request: None = None) -> StatusResponse:
        counts = await self.maintenance_service.status()
        return StatusResponse(**counts)
