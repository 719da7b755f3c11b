from typing import Optional

from ..config import LayoutSettings, Settings, get_settings
from ..utils.logger import setup_logger
from ...utils.error_handler import InputRejectedError, ProcessingFailureError
from .fragments import PdfFragmentSource
from .layout import TimetableLayoutParser
from .models import ParseResult


class PdfProcessor:
    def __init__(self,
                 layout_settings: Optional[LayoutSettings] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.parser = TimetableLayoutParser(layout_settings)
        self.logger = setup_logger("pdf_processor", settings=self.settings)

    def validate_upload(self,
                        filename: Optional[str],
                        content_type: Optional[str],
                        data: Optional[bytes]) -> None:
        """
        Reject uploads before any parsing happens.

        Raises:
            InputRejectedError: missing or empty file, wrong media type, or too large
        """
        if not filename or data is None:
            raise InputRejectedError("No file was uploaded")
        if content_type != self.settings.PDF_MEDIA_TYPE:
            raise InputRejectedError(
                f"Unsupported media type: {content_type}. Please select a valid PDF file"
            )
        if not data:
            raise InputRejectedError(f"File {filename} is empty")
        if len(data) > self.settings.MAX_FILE_SIZE:
            raise InputRejectedError(
                f"File {filename} exceeds the maximum size of {self.settings.MAX_FILE_SIZE} bytes"
            )

    async def parse_pdf_bytes(self, data: bytes) -> ParseResult:
        """
        Open a PDF held in memory and parse every page of it.

        Raises:
            ProcessingFailureError: if the PDF cannot be opened or parsed
        """
        try:
            source = PdfFragmentSource.from_bytes(data)
        except Exception as e:
            self.logger.error(f"Could not open PDF: {str(e)}")
            raise ProcessingFailureError(f"Could not open PDF: {str(e)}") from e

        with source:
            return await self.parse_document(source)

    async def parse_document(self, source) -> ParseResult:
        """
        Parse every page of a document, strictly in page order.

        Args:
            source: object with a ``page_count`` and an awaitable
                ``fetch_fragments(page_number)`` (1-based)

        Returns:
            ParseResult: entries of all pages, page i's before page i+1's

        Raises:
            ProcessingFailureError: on any unexpected error; no partial result
        """
        result = ParseResult()
        try:
            result.page_count = source.page_count
            self.logger.info(f"Processing document with {result.page_count} pages")

            for page_number in range(1, result.page_count + 1):
                fragments = await source.fetch_fragments(page_number)
                page_entries = self.parser.parse_page(fragments, page_number)
                if page_entries:
                    result.pages_with_entries += 1
                result.entries.extend(page_entries)

        except Exception as e:
            self.logger.error(f"Processing failed: {type(e).__name__}: {str(e)}")
            raise ProcessingFailureError(f"Processing failed: {str(e)}") from e

        if result.is_empty:
            self.logger.warning("No timetable data could be extracted from the document")
        else:
            self.logger.info(f"Extracted {len(result.entries)} entries "
                             f"from {result.pages_with_entries}/{result.page_count} pages")
        return result
