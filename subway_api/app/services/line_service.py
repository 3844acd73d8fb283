"""
Business logic for subway lines.

``LineService`` composes the station, section and line DAOs into the
create/read/update/delete operations exposed by the API.  Validation
(name uniqueness, existence of the line and of the stations of an
initial section) happens before any write.  Errors coming from SQLite
are not caught here and propagate to the caller.

Name uniqueness is enforced when a line is created but not when it is
updated; renaming a line onto another line's name is accepted.
"""

import logging
from typing import List

from subway_api.app.core.exceptions import (
    DuplicateLineNameError,
    InvalidSectionError,
    LineNotFoundError,
    StationNotFoundError,
)
from subway_api.app.dao.line_dao import LineDao
from subway_api.app.dao.section_dao import SectionDao
from subway_api.app.dao.station_dao import StationDao
from subway_api.app.domain import Line, Section, Station
from subway_api.app.schemas.line import LineCreate, LineRead, LineUpdate


class LineService:
    """Service for managing lines and their sections."""

    @classmethod
    async def create_line(cls, data: LineCreate) -> LineRead:
        """Store a new line and return it.

        When the payload names an up and a down station, the line is
        stored together with one initial section between them.

        Raises
        ------
        DuplicateLineNameError
            A line with the same name already exists.
        StationNotFoundError
            One of the section's stations does not exist.
        InvalidSectionError
            The up and down stations are the same.
        """
        logger = logging.getLogger(__name__)
        line = Line(data.name, data.color)
        if cls._exists(line):
            raise DuplicateLineNameError(data.name)

        if data.has_section:
            section = Section(
                up_station=cls._get_station(data.up_station_id),
                down_station=cls._get_station(data.down_station_id),
                distance=data.distance,
            )
            if section.up_station == section.down_station:
                raise InvalidSectionError("Up and down stations must differ")
            line = Line.with_section(data.name, data.color, section)

        line_id = LineDao.save_unique(line)
        if line_id is None:
            # Another request stored the name after the check above.
            raise DuplicateLineNameError(data.name)
        line.id = line_id
        logger.info("Created line %s '%s'", line.id, line.name)
        return LineRead.from_line(line)

    @classmethod
    async def get_line(cls, line_id: int) -> LineRead:
        """Return the line with its stations resolved.

        Raises ``LineNotFoundError`` if no line has that id.
        """
        return LineRead.from_line(cls._load(line_id))

    @classmethod
    async def list_lines(cls) -> List[LineRead]:
        lines = LineDao.find_all()
        for line in lines:
            line.sections = SectionDao.find_by_line_id(line.id)
        return [LineRead.from_line(line) for line in lines]

    @classmethod
    async def update_line(cls, line_id: int, data: LineUpdate) -> LineRead:
        """Rename/recolor a line.

        The store reports 0 updated rows for an unknown id, which is
        turned into ``LineNotFoundError``.  Names are not checked for
        uniqueness here.
        """
        logger = logging.getLogger(__name__)
        updated = LineDao.update(line_id, Line(data.name, data.color))
        if updated == 0:
            raise LineNotFoundError(line_id)
        logger.info("Updated line %s to '%s' (%s)", line_id, data.name, data.color)
        # The row may already be gone again; answer with the written values.
        line = Line(data.name, data.color, id=line_id, sections=SectionDao.find_by_line_id(line_id))
        return LineRead.from_line(line)

    @classmethod
    async def delete_line(cls, line_id: int) -> None:
        """Delete a line together with its sections."""
        logger = logging.getLogger(__name__)
        deleted = LineDao.delete(line_id)
        if deleted == 0:
            raise LineNotFoundError(line_id)
        logger.info("Deleted line %s", line_id)

    @staticmethod
    def _exists(line: Line) -> bool:
        existing = LineDao.find_by_name(line.name)
        return existing is not None and existing == line

    @staticmethod
    def _get_station(station_id: int) -> Station:
        station = StationDao.find_by_id(station_id)
        if station is None:
            raise StationNotFoundError(station_id)
        return station

    @staticmethod
    def _load(line_id: int) -> Line:
        line = LineDao.find_by_id(line_id)
        if line is None:
            raise LineNotFoundError(line_id)
        line.sections = SectionDao.find_by_line_id(line_id)
        return line
