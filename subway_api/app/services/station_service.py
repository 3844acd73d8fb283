"""Business logic for stations."""

import logging
from typing import List

from subway_api.app.dao.station_dao import StationDao
from subway_api.app.schemas.station import StationCreate, StationRead


class StationService:
    """Service for registering and listing stations."""

    @classmethod
    async def create_station(cls, data: StationCreate) -> StationRead:
        logger = logging.getLogger(__name__)
        station_id = StationDao.save(data.name)
        logger.info("Created station %s '%s'", station_id, data.name)
        return StationRead(id=station_id, name=data.name)

    @classmethod
    async def list_stations(cls) -> List[StationRead]:
        return [StationRead.from_station(s) for s in StationDao.find_all()]
