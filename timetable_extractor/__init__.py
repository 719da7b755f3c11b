"""
Timetable Extractor
-------------------
Extracts weekly class timetables from grid-shaped PDF documents.

The core infers the day x period grid of each page from the positioned text
of its text layer and assigns every fragment to its cell. A FastAPI service
and a command-line tool are built on top of it.
"""

__version__ = '0.1.0'

__all__ = ['__version__']
