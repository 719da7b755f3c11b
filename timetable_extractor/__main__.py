"""Command line entry point: ``python -m timetable_extractor timetable.pdf``."""
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from .app.core.filters import FilterSelection, entries_to_dataframe, export_csv, filter_entries
from .app.core.pdf_processor import PdfProcessor
from .app.core.constants import PDF_MEDIA_TYPE
from .utils.error_handler import InputRejectedError, ProcessingFailureError


def _parse_cli_args(argv: Optional[List[str]] = None):
    import argparse
    ap = argparse.ArgumentParser(description="Extract a class timetable from a grid PDF")
    ap.add_argument('pdf', help='Path to the timetable PDF')
    ap.add_argument('--class', dest='classes', action='append', default=[], help='Keep only this class (repeatable)')
    ap.add_argument('--day', dest='days', action='append', default=[], help='Keep only this day (repeatable)')
    ap.add_argument('--subject', dest='subjects', action='append', default=[], help='Keep only this subject (repeatable)')
    ap.add_argument('--csv', help='Write the entries to this CSV file instead of printing them')
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_cli_args(argv)
    pdf_path = Path(args.pdf)
    processor = PdfProcessor()

    try:
        data = pdf_path.read_bytes() if pdf_path.is_file() else None
        media_type = PDF_MEDIA_TYPE if pdf_path.suffix.lower() == '.pdf' else None
        processor.validate_upload(pdf_path.name if data is not None else None, media_type, data)
        result = asyncio.run(processor.parse_pdf_bytes(data))
    except (InputRejectedError, ProcessingFailureError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result.is_empty:
        print("No data could be extracted. The PDF layout may not be recognized.")
        return 0

    selection = FilterSelection(classes=args.classes, days=args.days, subjects=args.subjects)
    entries = filter_entries(result.entries, selection)

    if args.csv:
        export_csv(entries, args.csv)
        print(f"Saved {len(entries)} entries to: {args.csv}")
    elif entries:
        print(entries_to_dataframe(entries).to_string(index=False))
    else:
        print("No entries match the selected filters.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
