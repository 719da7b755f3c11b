"""
Error handling for the Timetable Extractor.
"""

from .error_handler import (
    handle_processing_error,
    InputRejectedError,
    ProcessingFailureError
)

__all__ = [
    'handle_processing_error',
    'InputRejectedError',
    'ProcessingFailureError'
]
