import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

class InputRejectedError(Exception):
    """Raised when an upload is missing, empty, too large or not a PDF."""
    pass

class ProcessingFailureError(Exception):
    """Raised when fragment retrieval or parsing fails unexpectedly."""
    pass

def handle_processing_error(error: Exception) -> Dict[str, Any]:
    """
    Turn an error raised while parsing a timetable into a response body.

    Args:
        error (Exception): The caught exception

    Returns:
        Dict[str, Any]: Error response details
    """
    if isinstance(error, InputRejectedError):
        logger.warning(f"Input rejected: {str(error)}")
    else:
        logger.error(f"Error occurred: {str(error)}", exc_info=error)

    error_response = {
        "status": "error",
        "message": str(error),
        "type": error.__class__.__name__
    }

    if isinstance(error, InputRejectedError):
        error_response["code"] = "INPUT_REJECTED"
    elif isinstance(error, ProcessingFailureError):
        error_response["code"] = "PROCESSING_FAILURE"
    else:
        error_response["code"] = "UNKNOWN_ERROR"

    return error_response
