"""Pydantic models for station data."""

from pydantic import BaseModel, Field, field_validator

from subway_api.app.domain import Station


class StationCreate(BaseModel):
    """Schema for creating a station."""

    name: str = Field(..., min_length=1, examples=["강남역"])

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Station name must not be blank")
        return v.strip()


class StationRead(BaseModel):
    """Schema for reading a station from the API."""

    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_station(cls, station: Station) -> "StationRead":
        return cls(id=station.id, name=station.name)
