"""
Availability checks: detect double-booking of an instructor or an attendee
at a given date and start time across all non-cancelled sessions.
"""
from datetime import date
from typing import Literal, Optional

from studio.core.conversions import normalize_time, parse_iso_date
from studio.core.errors import ValidationError
from studio.db.store import StudioStore
from studio.models.classModel import ClassSession

Role = Literal["instructor", "attendee"]


def find_conflict(
    store: StudioStore,
    person_id: str,
    session_date: date | str,
    start_time: str,
    role: Role,
    exclude_session_id: Optional[str] = None,
) -> Optional[ClassSession]:
    """Return the first session that would double-book the person, if any"""
    if role not in ("instructor", "attendee"):
        raise ValidationError(f"Unknown role '{role}'")

    day = parse_iso_date(session_date)
    slot = normalize_time(start_time)

    for session in store.data.classes:
        if session.is_cancelled or session.id == exclude_session_id:
            continue
        if session.date != day or session.start_time != slot:
            continue
        if role == "instructor" and session.instructor_id == person_id:
            return session
        if role == "attendee" and session.find_attendee(person_id) is not None:
            return session
    return None


def is_available(
    store: StudioStore,
    person_id: str,
    session_date: date | str,
    start_time: str,
    role: Role,
    exclude_session_id: Optional[str] = None,
) -> bool:
    return find_conflict(store, person_id, session_date, start_time, role, exclude_session_id) is None


def find_room_conflict(
    store: StudioStore,
    room_id: str,
    session_date: date | str,
    start_time: str,
    exclude_session_id: Optional[str] = None,
) -> Optional[ClassSession]:
    """Non-cancelled session already occupying the room slot"""
    day = parse_iso_date(session_date)
    slot = normalize_time(start_time)
    return next(
        (
            session for session in store.data.classes
            if not session.is_cancelled
            and session.id != exclude_session_id
            and session.room_id == room_id
            and session.date == day
            and session.start_time == slot
        ),
        None,
    )
