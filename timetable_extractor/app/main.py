import datetime
import os
from fastapi import APIRouter, FastAPI, UploadFile, File, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, Response
import uvicorn
from typing import Optional

from .core.filters import build_filter_options, export_csv, filter_entries
from .core.pdf_processor import PdfProcessor
from .utils.logger import setup_logger
from .api.models import FilterRequest, FilterResponse, ParseResponse
from .config import FrontendLogEntry, get_settings
from ..utils.error_handler import (
    InputRejectedError,
    ProcessingFailureError,
    handle_processing_error,
)

# Initialize necessary components
settings = get_settings()
api_logger = setup_logger("timetable_extractor")
frontend_logger = setup_logger("frontend", log_dir="frontend")

app = FastAPI(title="Timetable Extractor API")

origins = [
    "http://localhost:5173",  # Vite dev server
    "http://localhost:8000",  # FastAPI server
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "Content-Type"],
)

api_router = APIRouter(prefix="/api")

EMPTY_RESULT_MESSAGE = "No data could be extracted. The PDF layout may not be recognized."


@api_router.post("/frontend-logs")
async def save_frontend_log(log_entry: FrontendLogEntry):
    try:
        message = f"{log_entry.message}"
        if log_entry.details:
            message += f" | Details: {log_entry.details}"

        frontend_logger.log(log_entry.level, message)

        return {"status": "success", "message": "Log entry saved"}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@api_router.post("/parse", response_model=ParseResponse)
async def parse_timetable(file: Optional[UploadFile] = File(None)):
    """
    Parse an uploaded timetable PDF. Every request gets its own result;
    nothing is kept between uploads.
    """
    processor = PdfProcessor()
    try:
        data = await file.read() if file is not None else None
        filename = file.filename if file is not None else None
        content_type = file.content_type if file is not None else None

        processor.validate_upload(filename, content_type, data)
        api_logger.info(f"Parsing upload: {filename} ({len(data)} bytes)")

        result = await processor.parse_pdf_bytes(data)

    except InputRejectedError as e:
        raise HTTPException(status_code=400, detail=handle_processing_error(e))
    except ProcessingFailureError as e:
        raise HTTPException(status_code=500, detail=handle_processing_error(e))

    if result.is_empty:
        return ParseResponse(
            status=result.status,
            message=EMPTY_RESULT_MESSAGE,
            page_count=result.page_count,
        )

    return ParseResponse(
        status=result.status,
        message=f"Extracted {len(result.entries)} entries",
        page_count=result.page_count,
        pages_with_entries=result.pages_with_entries,
        entries=result.entries,
        options=build_filter_options(result.entries),
    )


@api_router.post("/filter", response_model=FilterResponse)
async def filter_timetable(request: FilterRequest):
    entries = filter_entries(request.entries, request.selection)
    return FilterResponse(entries=entries, count=len(entries))


@api_router.post("/export")
async def export_timetable(request: FilterRequest):
    """Download the (filtered) entries as CSV."""
    entries = filter_entries(request.entries, request.selection)
    filename = "timetable.csv"
    api_logger.info(f"Exporting {len(entries)} entries to CSV")
    return Response(
        content=export_csv(entries),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@api_router.get("/health")
async def health_check():
    """Health check endpoint for the application"""
    status = {
        "status": "healthy",
        "timestamp": datetime.datetime.now().isoformat(),
        "environment": settings.NODE_ENV,
    }
    if not settings.LOGS_DIR.exists():
        status.update({
            "status": "unhealthy",
            "storage_error": "logs directory not found"
        })
    return status


# Include the API router
app.include_router(api_router)


# Catch-all
@app.get("/{full_path:path}")
async def serve_frontend(full_path: str):
    # Skip API routes
    if full_path.startswith("api/"):
        raise HTTPException(404, "API route not found")

    index_path = settings.STATIC_DIR / "index.html"
    if index_path.exists():
        return FileResponse(str(index_path))
    else:
        api_logger.error(f"Frontend not found at {index_path}")
        raise HTTPException(404, "Frontend not found")


if __name__ == "__main__":
    port = int(os.getenv("API_PORT", 8000))
    uvicorn.run("timetable_extractor.app.main:app", host="0.0.0.0", port=port, reload=not settings.is_production)
