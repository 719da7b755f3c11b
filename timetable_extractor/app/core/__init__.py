"""Timetable layout inference: fragments in, timetable entries out."""
