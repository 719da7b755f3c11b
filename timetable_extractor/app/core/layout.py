# timetable_extractor/app/core/layout.py
import re
from typing import List, Optional, Sequence

from ..config import LayoutSettings
from ..utils.logger import setup_logger
from .constants import MISSING_TEACHER, TEACHER_SEPARATOR
from .models import CellBounds, DayColumn, PeriodRow, SubCell, TextFragment, TimetableEntry

PERIOD_PATTERN = re.compile(r"^\d$")


def is_period_label(fragment: TextFragment) -> bool:
    return bool(PERIOD_PATTERN.match(fragment.text.strip()))


def is_time_label(fragment: TextFragment) -> bool:
    return ":" in fragment.text


class TimetableLayoutParser:
    """
    Rebuilds the day x period grid of one timetable page from its text fragments.

    The page carries no table structure, only positioned text. The day header row
    is found through an anchor token, the period column through single digits on
    the left margin, and cell boundaries are inferred from the positions of those
    labels. Fragments inside a cell are then clustered horizontally so that two
    sessions sharing a slot come out as two entries.
    """

    def __init__(self, settings: Optional[LayoutSettings] = None):
        self.settings = settings or LayoutSettings()
        self.logger = setup_logger("layout_parser")

    def parse_page(self, fragments: Sequence[TextFragment], page_number: int) -> List[TimetableEntry]:
        """
        Extract every timetable entry of a page.

        Args:
            fragments: Text fragments of the page, in any order
            page_number: 1-based page number, used for the fallback title

        Returns:
            list: Entries ordered by period, then day, then sub-cell. Empty when
            the page does not look like a timetable grid.
        """
        class_name = self.detect_title(fragments, page_number)

        days = self.detect_days(fragments)
        if not days:
            self.logger.info(f"Page {page_number}: no '{self.settings.anchor_day}' header found, skipping")
            return []

        periods = self.detect_periods(fragments)
        if not periods:
            self.logger.info(f"Page {page_number}: no period labels found, skipping")
            return []

        self.logger.info(f"Page {page_number} ({class_name}): {len(days)} days x {len(periods)} periods")

        entries = []
        for period_index, period in enumerate(periods):
            for day_index, day in enumerate(days):
                bounds = self.build_cell_bounds(periods, period_index, days, day_index)
                cell_fragments = self.collect_cell_fragments(fragments, bounds)
                if not cell_fragments:
                    continue

                for sub_cell in self.split_sub_cells(cell_fragments):
                    fields = self.resolve_fields(sub_cell)
                    if fields is None:
                        continue
                    subject, teacher = fields
                    entries.append(TimetableEntry(
                        classe=class_name,
                        jour=day.name,
                        horaire=period.time,
                        periode=period.label,
                        matiere=subject,
                        enseignant=teacher,
                    ))

        self.logger.info(f"Found {len(entries)} entries on page {page_number}")
        return entries

    def detect_title(self, fragments: Sequence[TextFragment], page_number: int) -> str:
        """Pick the highest large fragment at the top of the page as the class name."""
        candidates = [
            f for f in fragments
            if f.y > self.settings.page_top_threshold
            and f.height > self.settings.title_height_threshold
            and f.text.strip()
        ]
        if not candidates:
            return f"Page {page_number}"

        # max() keeps the first of equally high candidates
        return max(candidates, key=lambda f: f.y).text.strip()

    def detect_days(self, fragments: Sequence[TextFragment]) -> List[DayColumn]:
        anchor_token = self.settings.anchor_day.lower()
        anchor = next((f for f in fragments if f.text.strip().lower() == anchor_token), None)
        if anchor is None:
            return []

        header = [
            f for f in fragments
            if abs(f.y - anchor.y) < self.settings.row_tolerance
            and len(f.text.strip()) > self.settings.day_min_length
        ]
        header.sort(key=lambda f: f.x)
        return [DayColumn(name=f.text.strip(), x=f.x, width=f.width) for f in header]

    def detect_periods(self, fragments: Sequence[TextFragment]) -> List[PeriodRow]:
        periods = []
        for fragment in fragments:
            if not is_period_label(fragment) or fragment.x >= self.settings.period_margin:
                continue

            time_fragment = next(
                (f for f in fragments
                 if abs(f.y - fragment.y) < self.settings.row_tolerance and is_time_label(f)),
                None,
            )
            periods.append(PeriodRow(
                label=fragment.text.strip(),
                time=time_fragment.text.strip() if time_fragment else "",
                y=fragment.y,
                height=fragment.height,
            ))

        # Top of the page first
        periods.sort(key=lambda p: p.y, reverse=True)
        return periods

    def build_cell_bounds(self,
                          periods: List[PeriodRow],
                          period_index: int,
                          days: List[DayColumn],
                          day_index: int) -> CellBounds:
        """
        Derive the rectangle of one (period, day) cell.

        Columns start half a header width left of the day label and end where
        the next one starts. Rows run from the top of the period label down to
        the top of the period below it.
        """
        day = days[day_index]
        period = periods[period_index]

        x_start = day.x - day.width / 2
        if day_index + 1 < len(days):
            next_day = days[day_index + 1]
            x_end = next_day.x - next_day.width / 2
        else:
            x_end = self.settings.open_right_bound

        lower = next((p for p in periods[period_index + 1:] if p.y < period.y), None)
        y_start = lower.y + lower.height if lower else 0.0
        y_end = period.y + period.height

        return CellBounds(x_start=x_start, x_end=x_end, y_start=y_start, y_end=y_end)

    def collect_cell_fragments(self,
                               fragments: Sequence[TextFragment],
                               bounds: CellBounds) -> List[TextFragment]:
        """Content fragments inside the cell; period digits and times are structural."""
        return [
            f for f in fragments
            if bounds.contains(f)
            and f.text.strip()
            and not is_time_label(f)
            and not is_period_label(f)
        ]

    def split_sub_cells(self, cell_fragments: Sequence[TextFragment]) -> List[SubCell]:
        """
        Cluster the fragments of a cell into side-by-side sessions.

        A fragment opens a new sub-cell when it starts more than split_gap units
        right of the previous fragment's right edge. Each sub-cell comes back in reading
        order, top to bottom.
        """
        ordered = sorted(cell_fragments, key=lambda f: (f.x, -f.y, f.text))

        sub_cells: List[SubCell] = []
        previous = None
        for fragment in ordered:
            if previous is None or fragment.x - previous.right > self.settings.split_gap:
                sub_cells.append(SubCell())
            sub_cells[-1].fragments.append(fragment)
            previous = fragment

        for sub_cell in sub_cells:
            sub_cell.fragments.sort(key=lambda f: (-f.y, f.x, f.text))
        return sub_cells

    def resolve_fields(self, sub_cell: SubCell) -> Optional[tuple]:
        """
        Split a sub-cell into (subject, teacher).

        A group label ("Group 2", "group A") is moved out of the text and
        appended to the subject in parentheses. Returns None when nothing is
        left to use as a subject.
        """
        remaining = list(sub_cell.fragments)
        group_token = self.settings.group_token.lower()

        group_label = None
        for index, fragment in enumerate(remaining):
            if fragment.text.strip().lower().startswith(group_token):
                group_label = remaining.pop(index).text.strip()
                break

        if not remaining:
            return None

        subject = remaining[0].text.strip()
        if group_label:
            subject = f"{subject} ({group_label})"

        teachers = [f.text.strip() for f in remaining[1:]]
        teacher = TEACHER_SEPARATOR.join(teachers) if teachers else MISSING_TEACHER
        return subject, teacher
