"""FastAPI service and timetable layout core."""
