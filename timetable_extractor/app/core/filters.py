# timetable_extractor/app/core/filters.py
from typing import Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel

from .constants import DISPLAY_HEADERS
from .models import TimetableEntry


class FilterSelection(BaseModel):
    """Selected values per dimension. An empty list matches everything."""
    classes: List[str] = []
    days: List[str] = []
    subjects: List[str] = []


class FilterOptions(BaseModel):
    classes: List[str] = []
    days: List[str] = []
    subjects: List[str] = []


def build_filter_options(entries: Iterable[TimetableEntry]) -> FilterOptions:
    """Distinct values for the filter widgets. Days keep their extraction order."""
    entries = list(entries)
    days = list(dict.fromkeys(entry.jour for entry in entries))
    return FilterOptions(
        classes=sorted({entry.classe for entry in entries}),
        days=days,
        subjects=sorted({entry.matiere for entry in entries}),
    )


def filter_entries(entries: Iterable[TimetableEntry],
                   selection: Optional[FilterSelection] = None) -> List[TimetableEntry]:
    if selection is None:
        return list(entries)

    def matches(values: List[str], value: str) -> bool:
        return not values or value in values

    return [
        entry for entry in entries
        if matches(selection.classes, entry.classe)
        and matches(selection.days, entry.jour)
        and matches(selection.subjects, entry.matiere)
    ]


def entries_to_dataframe(entries: Iterable[TimetableEntry]) -> pd.DataFrame:
    """Table of entries with the display column headers, in document order."""
    df = pd.DataFrame([entry.model_dump() for entry in entries], columns=list(DISPLAY_HEADERS))
    return df.rename(columns=DISPLAY_HEADERS)


def export_csv(entries: Iterable[TimetableEntry], path=None) -> str:
    """Write entries as CSV to path, or return the CSV text when path is None."""
    df = entries_to_dataframe(entries)
    if path is None:
        return df.to_csv(index=False)
    df.to_csv(path, index=False)
    return str(path)
