"""
Pydantic models for line data.

``LineCreate`` accepts an optional initial section given by the ids of
its up and down stations (``upStationId`` / ``downStationId`` on the
wire) and its ``distance``.  Either both station ids are supplied or
neither is, and ``distance`` is only accepted together with them.
``LineRead`` is the response body: the line plus its distinct stations
in order.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from subway_api.app.core.db import SQLITE_MAX_INTEGER
from subway_api.app.domain import Line
from subway_api.app.schemas.station import StationRead


class LineBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["3호선"])
    color: str = Field(..., min_length=1, examples=["bg-orange-600"])

    @field_validator("name", "color")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class LineCreate(LineBase):
    """Schema for creating a line, optionally with its first section."""

    up_station_id: Optional[int] = Field(None, alias="upStationId")
    down_station_id: Optional[int] = Field(None, alias="downStationId")
    distance: int = Field(0, ge=0, le=SQLITE_MAX_INTEGER)

    model_config = {
        "populate_by_name": True,
    }

    @model_validator(mode="after")
    def both_stations_or_none(self) -> "LineCreate":
        if (self.up_station_id is None) != (self.down_station_id is None):
            raise ValueError("upStationId and downStationId must be given together")
        if self.up_station_id is None and "distance" in self.model_fields_set:
            raise ValueError("distance requires upStationId and downStationId")
        return self

    @property
    def has_section(self) -> bool:
        return self.up_station_id is not None


class LineUpdate(LineBase):
    """Schema for renaming or recoloring a line.  Both fields are required."""


class LineRead(BaseModel):
    """Schema for reading a line from the API."""

    id: int
    name: str
    color: str
    stations: List[StationRead] = []

    @classmethod
    def from_line(cls, line: Line) -> "LineRead":
        return cls(
            id=line.id,
            name=line.name,
            color=line.color,
            stations=[StationRead.from_station(s) for s in line.stations()],
        )
