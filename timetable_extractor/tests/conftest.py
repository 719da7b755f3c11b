import pymupdf
import pytest

from timetable_extractor.app.core.models import TextFragment

PAGE_WIDTH = 595
PAGE_HEIGHT = 842


def frag(text, x, y, width=25.0, height=10.0):
    return TextFragment(text=text, x=x, y=y, width=width, height=height)


def make_pdf(pages):
    """
    Build a PDF in memory. Each page is a list of (text, x, y, fontsize) with
    x/y in PDF space (y upward), the same space the fragments come back in.
    """
    doc = pymupdf.open()
    for items in pages:
        page = doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        for text, x, y, fontsize in items:
            page.insert_text((x, PAGE_HEIGHT - y), text, fontsize=fontsize)
    data = doc.tobytes()
    doc.close()
    return data


TIMETABLE_PAGE = [
    ("10A", 40, 790, 20),
    ("Sunday", 100, 720, 11),
    ("Monday", 250, 720, 11),
    ("1", 20, 600, 11),
    ("08:00-09:00", 45, 600, 8),
    ("Math", 105, 590, 11),
    ("J.Doe", 105, 575, 11),
    ("Physics", 255, 590, 11),
]


@pytest.fixture
def timetable_pdf():
    return make_pdf([TIMETABLE_PAGE])


@pytest.fixture
def blank_pdf():
    return make_pdf([[("Nothing to see here", 50, 700, 11)]])


@pytest.fixture
def sample_page():
    """The one-cell page: Sunday/Monday header, period 1, Math by J.Doe."""
    return [
        frag("Sunday", 100, 720, width=40),
        frag("Monday", 200, 720, width=40),
        frag("1", 20, 600, width=5),
        frag("08:00-09:00", 20, 600, width=50),
        frag("Math", 105, 590),
        frag("J.Doe", 105, 580),
    ]
