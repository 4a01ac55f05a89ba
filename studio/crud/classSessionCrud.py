"""
CRUD operations for ClassSession management
Implements session scheduling, status transitions and completion side effects
"""
import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from studio.core.catalog import get_room
from studio.core.conversions import normalize_time, parse_iso_date, time_plus_one_hour
from studio.core.errors import NotFound, ScheduleCollision, ValidationError
from studio.crud.availabilityCrud import find_conflict, find_room_conflict
from studio.crud.instructorsCrud import get_instructor_or_raise
from studio.crud.plansCrud import debit_credit, find_eligible_plan
from studio.crud.studentsCrud import append_history
from studio.db.store import StudioStore
from studio.models.classModel import SESSION_STATUSES, ClassSession
from studio.models.storageModel import StudioData

logger = logging.getLogger(__name__)


class CreditOutcome(str, Enum):
    DEDUCTED = "deducted"
    NO_PLAN_FOUND = "no_plan_found"
    ALREADY_DEDUCTED = "already_deducted"
    NOT_STANDARD = "not_standard"


@dataclass
class AttendeeCreditResult:
    """What completion did with one booked attendee's credit"""
    student_id: str
    outcome: CreditOutcome
    plan_id: Optional[str] = None
    plan_removed: bool = False


@dataclass
class ClassSessionUpdate:
    """Mutable fields of a session; None leaves the field unchanged"""
    instructor_id: Optional[str] = None
    session_date: Optional[date] = None
    start_time: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    room_id: Optional[str] = None
    max_capacity: Optional[int] = None
    is_private: Optional[bool] = None
    notes: Optional[str] = None


@dataclass
class SessionUpdateResult:
    session: ClassSession
    credit_results: List[AttendeeCreditResult] = field(default_factory=list)


def get_class_session_or_raise(store: StudioStore, session_id: str) -> ClassSession:
    session = store.data.find_class(session_id)
    if session is None:
        raise NotFound(f"Session {session_id} not found")
    return session


def get_sessions_by_date_range(
    store: StudioStore,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    *,
    instructor_id: Optional[str] = None,
    room_id: Optional[str] = None,
    status: Optional[str] = None,
    student_id: Optional[str] = None,
) -> List[ClassSession]:
    """Sessions in the inclusive date range, ordered by date and start time"""
    sessions = []
    for session in store.data.classes:
        if start_date and session.date < start_date:
            continue
        if end_date and session.date > end_date:
            continue
        if instructor_id and session.instructor_id != instructor_id:
            continue
        if room_id and session.room_id != room_id:
            continue
        if status and session.status != status:
            continue
        if student_id and session.find_attendee(student_id) is None:
            continue
        sessions.append(session)
    return sorted(sessions, key=lambda s: (s.date, s.start_time))


def _check_slot(
    store: StudioStore,
    *,
    instructor_id: str,
    room_id: str,
    session_date: date,
    start_time: str,
    exclude_session_id: Optional[str] = None,
) -> None:
    """Reject an instructor double-booking or an occupied room slot"""
    clash = find_conflict(store, instructor_id, session_date, start_time, "instructor", exclude_session_id)
    if clash is not None:
        raise ScheduleCollision(
            f"Instructor already teaches {clash.type} on {session_date} at {start_time}"
        )
    occupied = find_room_conflict(store, room_id, session_date, start_time, exclude_session_id)
    if occupied is not None:
        raise ScheduleCollision(
            f"Room {room_id} already has a session on {session_date} at {start_time}"
        )


def create_class_session(
    store: StudioStore,
    *,
    instructor_id: Optional[str],
    session_date: date | str,
    start_time: str,
    type: Optional[str],
    room_id: str,
    max_capacity: int,
    is_private: bool = False,
    status: str = "scheduled",
    notes: str = "",
) -> ClassSession:
    """Schedule a new one-hour session"""
    if not instructor_id or not type:
        raise ValidationError("Select an instructor and a discipline")
    if get_room(room_id) is None:
        raise NotFound(f"Room {room_id} not found")
    if max_capacity is None or max_capacity < 1:
        raise ValidationError("Capacity must be at least 1")
    if status not in SESSION_STATUSES:
        raise ValidationError(f"Unknown session status '{status}'")
    if status == "completed":
        raise ValidationError("A session cannot be created as completed")

    day = parse_iso_date(session_date)
    slot = normalize_time(start_time)

    with store.transaction() as data:
        instructor = get_instructor_or_raise(store, instructor_id)
        if status != "cancelled":
            _check_slot(store, instructor_id=instructor_id, room_id=room_id, session_date=day, start_time=slot)

        session = ClassSession(
            id=str(uuid.uuid4()),
            instructor_id=instructor.id,
            instructor_name=instructor.name,
            date=day,
            start_time=slot,
            end_time=time_plus_one_hour(slot),
            status=status,
            type=type,
            room_id=room_id,
            max_capacity=max_capacity,
            is_private=is_private,
            notes=notes,
        )
        data.classes.append(session)

    logger.info(
        "Session %s scheduled: %s in %s on %s %s with %s",
        session.id, type, room_id, day, slot, instructor.name,
    )
    return session


def _complete_session(data: StudioData, session: ClassSession) -> List[AttendeeCreditResult]:
    """Debit one credit per booked standard attendee; never fails"""
    results = []
    for attendee in session.booked_attendees:
        if attendee.attendance_type != "standard":
            results.append(AttendeeCreditResult(attendee.student_id, CreditOutcome.NOT_STANDARD))
            continue
        if attendee.credit_deducted:
            results.append(AttendeeCreditResult(attendee.student_id, CreditOutcome.ALREADY_DEDUCTED))
            continue

        student = data.find_student(attendee.student_id)
        plan = find_eligible_plan(student, session.type, session.date) if student else None
        if plan is None:
            logger.warning(
                "No plan to debit for student %s in session %s (%s)",
                attendee.student_id, session.id, session.type,
            )
            results.append(AttendeeCreditResult(attendee.student_id, CreditOutcome.NO_PLAN_FOUND))
            continue

        removed = debit_credit(student, plan)
        attendee.credit_deducted = True
        append_history(
            student,
            activity=f"Clase: {session.type}",
            notes=f"Instructor: {session.instructor_name}",
            cost=0,
            entry_date=session.date,
        )
        results.append(AttendeeCreditResult(attendee.student_id, CreditOutcome.DEDUCTED, plan.id, removed))
    return results


def update_class_session(
    store: StudioStore,
    session_id: str,
    changes: ClassSessionUpdate,
) -> SessionUpdateResult:
    """
    Edit a session.

    Moving a session into 'completed' debits attendee credits once; the
    per-attendee outcome is returned. Moving it out of 'completed' does not
    refund anything.
    """
    if changes.status is not None and changes.status not in SESSION_STATUSES:
        raise ValidationError(f"Unknown session status '{changes.status}'")
    if changes.max_capacity is not None and changes.max_capacity < 1:
        raise ValidationError("Capacity must be at least 1")
    if changes.instructor_id is not None and not changes.instructor_id:
        raise ValidationError("Select an instructor")
    if changes.type is not None and not changes.type:
        raise ValidationError("Select a discipline")
    if changes.room_id is not None and get_room(changes.room_id) is None:
        raise NotFound(f"Room {changes.room_id} not found")

    with store.transaction() as data:
        session = get_class_session_or_raise(store, session_id)
        old_status = session.status

        instructor = get_instructor_or_raise(store, changes.instructor_id) if changes.instructor_id else None
        new_date = parse_iso_date(changes.session_date) if changes.session_date is not None else session.date
        new_start = normalize_time(changes.start_time) if changes.start_time is not None else session.start_time
        new_room = changes.room_id or session.room_id
        new_status = changes.status or old_status
        new_instructor_id = instructor.id if instructor else session.instructor_id

        slot_changed = (
            new_instructor_id != session.instructor_id
            or new_date != session.date
            or new_start != session.start_time
            or new_room != session.room_id
            or old_status == "cancelled"
        )
        if new_status != "cancelled" and slot_changed:
            _check_slot(
                store,
                instructor_id=new_instructor_id,
                room_id=new_room,
                session_date=new_date,
                start_time=new_start,
                exclude_session_id=session.id,
            )

        if instructor is not None:
            session.instructor_id = instructor.id
            session.instructor_name = instructor.name
        session.date = new_date
        session.start_time = new_start
        session.end_time = time_plus_one_hour(new_start)
        session.room_id = new_room
        session.status = new_status
        if changes.type is not None:
            session.type = changes.type
        if changes.max_capacity is not None:
            if changes.max_capacity < session.booked_count:
                logger.warning(
                    "Session %s capacity lowered to %s below %s booked attendees",
                    session.id, changes.max_capacity, session.booked_count,
                )
            session.max_capacity = changes.max_capacity
        if changes.is_private is not None:
            session.is_private = changes.is_private
        if changes.notes is not None:
            session.notes = changes.notes

        credit_results: List[AttendeeCreditResult] = []
        if old_status != "completed" and new_status == "completed":
            credit_results = _complete_session(data, session)
        elif old_status == "completed" and new_status != "completed":
            logger.warning("Session %s moved from completed to %s; credits are not refunded", session.id, new_status)

    if old_status != new_status:
        logger.info("Session %s status %s -> %s", session_id, old_status, new_status)
    return SessionUpdateResult(session=session, credit_results=credit_results)


def update_session_status(store: StudioStore, session_id: str, new_status: str) -> SessionUpdateResult:
    return update_class_session(store, session_id, ClassSessionUpdate(status=new_status))


def delete_class_session(store: StudioStore, session_id: str) -> ClassSession:
    """Remove the session; credits already debited stay debited"""
    with store.transaction() as data:
        session = get_class_session_or_raise(store, session_id)
        data.classes = [c for c in data.classes if c.id != session_id]

    if any(a.credit_deducted for a in session.attendees):
        logger.warning("Deleted session %s had debited credits; no refund applied", session_id)
    logger.info("Session %s deleted", session_id)
    return session
