# timetable_extractor/app/core/fragments.py
import asyncio
from pathlib import Path
from typing import List, Union

import pymupdf

from .models import TextFragment
from ..utils.logger import setup_logger


class PdfFragmentSource:
    """
    Reads positioned text fragments from the text layer of a PDF.

    Every span returned by PyMuPDF becomes one TextFragment. PyMuPDF measures y
    downward from the top of the page, so the span baseline is flipped into PDF
    space (y upward from the bottom) to match the layout thresholds.
    """

    def __init__(self, doc: pymupdf.Document):
        self.doc = doc
        self.logger = setup_logger("fragments")

    @classmethod
    def from_bytes(cls, data: bytes) -> "PdfFragmentSource":
        return cls(pymupdf.open(stream=data, filetype="pdf"))

    @classmethod
    def from_path(cls, file_path: Union[str, Path]) -> "PdfFragmentSource":
        return cls(pymupdf.open(file_path))

    @property
    def page_count(self) -> int:
        return len(self.doc)

    async def fetch_fragments(self, page_number: int) -> List[TextFragment]:
        """Return the fragments of a page (1-based page number)."""
        return await asyncio.to_thread(self._extract_page, page_number)

    def _extract_page(self, page_number: int) -> List[TextFragment]:
        page = self.doc[page_number - 1]
        page_height = page.rect.height
        fragments = []

        text_dict = page.get_text("dict")
        for block in text_dict.get("blocks", []):
            # Image blocks have no lines
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    text = span.get("text", "")
                    if not text:
                        continue
                    x0, _, x1, _ = span["bbox"]
                    origin_x, origin_y = span["origin"]
                    fragments.append(TextFragment(
                        text=text,
                        x=origin_x,
                        y=page_height - origin_y,
                        width=x1 - x0,
                        height=span.get("size", 0.0),
                    ))

        self.logger.debug(f"Page {page_number}: {len(fragments)} fragments")
        return fragments

    def close(self) -> None:
        self.doc.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
