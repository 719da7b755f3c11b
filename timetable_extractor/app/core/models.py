# timetable_extractor/app/core/models.py
from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel


@dataclass(frozen=True)
class TextFragment:
    """One positioned run of text. PDF space: origin bottom-left, y upward."""
    text: str
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class DayColumn:
    name: str
    x: float
    width: float = 0.0


@dataclass
class PeriodRow:
    label: str
    time: str
    y: float
    height: float = 0.0


@dataclass
class CellBounds:
    x_start: float
    x_end: float
    y_start: float
    y_end: float

    def contains(self, fragment: TextFragment) -> bool:
        # Strict on every side
        return (self.x_start < fragment.x < self.x_end
                and self.y_start < fragment.y < self.y_end)


@dataclass
class SubCell:
    """Fragments of one course occurrence inside a grid cell."""
    fragments: List[TextFragment] = field(default_factory=list)


class TimetableEntry(BaseModel):
    classe: str
    jour: str
    horaire: str
    periode: str
    matiere: str
    enseignant: str


@dataclass
class ParseResult:
    """Everything extracted from one document, in page order."""
    entries: List[TimetableEntry] = field(default_factory=list)
    page_count: int = 0
    pages_with_entries: int = 0

    @property
    def status(self) -> str:
        return "completed" if self.entries else "empty"

    @property
    def is_empty(self) -> bool:
        return not self.entries
