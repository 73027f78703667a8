"""Event data model shared by display and serialization."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class EventRecord:
    """Normalized, serialization-ready representation of one calendar event.

    ``start`` and ``end`` are always timezone-aware. Optional text fields are
    empty strings rather than ``None``.
    """

    summary: str
    start: datetime
    end: datetime
    location: str = ""
    description: str = ""


@dataclass(frozen=True)
class MappingAnomaly:
    """A field that had to be defaulted while mapping a raw event.

    Informational only; anomalies are reported, never raised.
    """

    index: int
    field: str
    message: str

    def __str__(self) -> str:
        return f"event {self.index + 1}: {self.field}: {self.message}"


@dataclass
class MappingResult:
    """Records mapped from a batch of raw events, in input order."""

    records: List[EventRecord] = field(default_factory=list)
    anomalies: List[MappingAnomaly] = field(default_factory=list)
