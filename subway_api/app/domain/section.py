"""Section domain model."""

from dataclasses import dataclass
from typing import Optional

from .station import Station


@dataclass
class Section:
    """A directed edge between two stations belonging to one line."""

    up_station: Station
    down_station: Station
    distance: int = 0
    line_id: Optional[int] = None
    id: Optional[int] = None

    @property
    def up_station_id(self) -> Optional[int]:
        return self.up_station.id

    @property
    def down_station_id(self) -> Optional[int]:
        return self.down_station.id
