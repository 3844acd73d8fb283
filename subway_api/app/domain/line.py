"""
Line domain model.

A line is identified by its name: two ``Line`` instances compare equal
whenever their names are equal, regardless of id, color or sections.
The duplicate-name check on creation relies on this.
"""

from typing import List, Optional

from .section import Section
from .station import Station


class Line:
    """A named, colored subway route made of an ordered list of sections."""

    def __init__(
        self,
        name: str,
        color: str,
        id: Optional[int] = None,
        sections: Optional[List[Section]] = None,
    ) -> None:
        self.id = id
        self.name = name
        self.color = color
        self.sections: List[Section] = list(sections) if sections else []

    @classmethod
    def with_section(
        cls, name: str, color: str, section: Section, id: Optional[int] = None
    ) -> "Line":
        """Build a line carrying a single initial section."""
        return cls(name, color, id=id, sections=[section])

    def update(self, name: str, color: str) -> None:
        self.name = name
        self.color = color

    def stations(self) -> List[Station]:
        """Return the distinct stations of the line in first-seen order.

        Sections are walked in order, collecting the up station and then
        the down station of each, so ``[(A, B), (B, C)]`` yields
        ``[A, B, C]``.
        """
        seen = []
        for section in self.sections:
            seen.append(section.up_station)
            seen.append(section.down_station)
        return list(dict.fromkeys(seen))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Line):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Line(id={self.id!r}, name={self.name!r}, color={self.color!r})"
