"""
Domain error taxonomy.

Services raise these exceptions; the HTTP layer maps each of them to a
status code.  Storage failures (``sqlite3.Error``) are not wrapped and
propagate unchanged.
"""


class SubwayError(Exception):
    """Base class for all domain errors."""


class DuplicateLineNameError(SubwayError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Line with name '{name}' already exists")
        self.name = name


class LineNotFoundError(SubwayError):
    def __init__(self, line_id: int) -> None:
        super().__init__(f"Line {line_id} not found")
        self.line_id = line_id


class StationNotFoundError(SubwayError):
    def __init__(self, station_id: int) -> None:
        super().__init__(f"Station {station_id} not found")
        self.station_id = station_id


class InvalidSectionError(SubwayError):
    """Raised when a section cannot connect the given stations."""
