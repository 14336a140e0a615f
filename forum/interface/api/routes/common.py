"""Store-wide routes: clear and status."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from forum.application.usecase.maintenance import (
    ClearStoreUseCase,
    GetStatusUseCase,
    StatusResponse,
)
from forum.interface.api.schema import Envelope

router = APIRouter(prefix="/db/api", tags=["common"], route_class=DishkaRoute)


@router.post("/clear/", response_model=Envelope[str])
async def clear(clear_use_case: FromDishka[ClearStoreUseCase]) -> Envelope[str]:
    """Delete every thread and post and restart ids at 1."""
    return Envelope(response=await clear_use_case.execute())


@router.get("/status/", response_model=Envelope[StatusResponse])
async def get_status(
    status_use_case: FromDishka[GetStatusUseCase],
) -> Envelope[StatusResponse]:
    """Count stored threads and posts."""
    return Envelope(response=await status_use_case.execute())
