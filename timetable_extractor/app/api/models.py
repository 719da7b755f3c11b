# timetable_extractor/app/api/models.py
from pydantic import BaseModel
from typing import List

from ..core.filters import FilterOptions, FilterSelection
from ..core.models import TimetableEntry


class ParseResponse(BaseModel):
    status: str
    message: str
    page_count: int = 0
    pages_with_entries: int = 0
    entries: List[TimetableEntry] = []
    options: FilterOptions = FilterOptions()


class FilterRequest(BaseModel):
    entries: List[TimetableEntry]
    selection: FilterSelection = FilterSelection()


class FilterResponse(BaseModel):
    entries: List[TimetableEntry]
    count: int
