from __future__ import annotations

from fastapi import APIRouter

from gauchoride.config import get_settings
from gauchoride.models.schemas import HealthResponse, SystemInfo
from gauchoride.observability.routing import LoggedRoute
from gauchoride.services.system_info import get_system_info

router = APIRouter(tags=["system"], route_class=LoggedRoute)


@router.get("/api/systemInfo", response_model=SystemInfo)
async def system_info() -> SystemInfo:
    return get_system_info(get_settings())


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()
