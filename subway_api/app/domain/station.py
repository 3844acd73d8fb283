"""Station domain model."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Station:
    """A named point referenced by one or more sections."""

    name: str
    id: Optional[int] = None
