"""Station endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Response, status

from subway_api.app.core.config import settings
from subway_api.app.schemas.station import StationCreate, StationRead
from subway_api.app.services.station_service import StationService

router = APIRouter(prefix="/stations", tags=["stations"])


@router.post("", response_model=StationRead, status_code=status.HTTP_201_CREATED)
async def create_station(station_in: StationCreate, response: Response) -> StationRead:
    station = await StationService.create_station(station_in)
    response.headers["Location"] = f"{settings.api_prefix}/stations/{station.id}"
    return station


@router.get("", response_model=List[StationRead])
async def list_stations() -> List[StationRead]:
    return await StationService.list_stations()
