"""Domain objects shared by the stores and the services."""

from .line import Line
from .section import Section
from .station import Station

__all__ = ["Line", "Section", "Station"]
