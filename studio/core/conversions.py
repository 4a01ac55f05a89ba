"""Conversion helpers for dates and session times."""

from datetime import date, datetime, timedelta

from studio.core.errors import ValidationError


def parse_iso_date(value: object) -> date:
    """Parse a YYYY-MM-DD string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD") from exc


def normalize_time(value: str) -> str:
    """Return a zero-padded HH:MM string for inputs like '9:00' or '09:00'."""
    try:
        parsed = datetime.strptime(str(value).strip(), "%H:%M")
    except ValueError as exc:
        raise ValidationError(f"Invalid time '{value}', expected HH:MM") from exc
    return parsed.strftime("%H:%M")


def time_plus_one_hour(start_time: str) -> str:
    start = datetime.strptime(normalize_time(start_time), "%H:%M")
    return (start + timedelta(hours=1)).strftime("%H:%M")
