"""
Enrollment engine: attach and detach attendees from class sessions.

No credit is reserved at enrollment time; credits are debited when the
session is completed (see classSessionCrud).
"""
import logging
from typing import Optional

from studio.core.errors import (
    AlreadyEnrolled,
    CapacityExceeded,
    NoEligiblePlan,
    NotFound,
    ScheduleCollision,
    ValidationError,
)
from studio.crud.availabilityCrud import find_conflict
from studio.crud.classSessionCrud import get_class_session_or_raise
from studio.crud.plansCrud import RefundOutcome, find_eligible_plan, get_student_or_raise, refund_credit
from studio.db.store import StudioStore
from studio.models.classModel import ATTENDANCE_TYPES, Attendee, ClassSession

logger = logging.getLogger(__name__)


def enroll(
    store: StudioStore,
    session_id: str,
    student_id: str,
    attendance_type: str = "standard",
    student_name: Optional[str] = None,
) -> Attendee:
    """
    Book a student into a session.

    Raises NotFound, CapacityExceeded, AlreadyEnrolled, ScheduleCollision or
    NoEligiblePlan. Guests and courtesy attendance skip the plan check.
    """
    if attendance_type not in ATTENDANCE_TYPES:
        raise ValidationError(f"Unknown attendance type '{attendance_type}'")

    with store.transaction():
        session = get_class_session_or_raise(store, session_id)
        student = get_student_or_raise(store, student_id)

        if session.booked_count >= session.max_capacity:
            raise CapacityExceeded(
                f"Session is full ({session.booked_count}/{session.max_capacity})"
            )
        if session.find_attendee(student_id) is not None:
            raise AlreadyEnrolled(f"{student.name} is already booked in this session")

        clash = find_conflict(store, student_id, session.date, session.start_time, "attendee", session.id)
        if clash is not None:
            raise ScheduleCollision(
                f"{student.name} already has {clash.type} on {session.date} at {session.start_time}"
            )

        if attendance_type == "standard" and not student.is_guest:
            if find_eligible_plan(student, session.type, session.date) is None:
                raise NoEligiblePlan(f"{student.name} has no active plan with credits for {session.type}")

        # A cancelled record is reactivated so an earlier debit stays recorded
        attendee = session.find_attendee(student_id, booked_only=False)
        if attendee is not None:
            attendee.status = "booked"
            attendee.attendance_type = attendance_type
            attendee.student_name = student_name or student.name
        else:
            attendee = Attendee(
                student_id=student.id,
                student_name=student_name or student.name,
                status="booked",
                attendance_type=attendance_type,
                credit_deducted=False,
            )
            session.attendees.append(attendee)

    logger.info(
        "Student %s enrolled in session %s (%s), %s/%s booked",
        student_id, session_id, attendance_type, session.booked_count, session.max_capacity,
    )
    return attendee


def unenroll(store: StudioStore, session_id: str, student_id: str) -> RefundOutcome:
    """Remove the attendee record, refunding a credit that was already debited"""
    with store.transaction() as data:
        session = get_class_session_or_raise(store, session_id)
        attendee = session.find_attendee(student_id, booked_only=False)
        if attendee is None:
            raise NotFound(f"Student {student_id} is not enrolled in session {session_id}")

        session.attendees = [a for a in session.attendees if a is not attendee]

        outcome = RefundOutcome.NOT_DEDUCTED
        if attendee.credit_deducted:
            student = data.find_student(student_id)
            if student is None:
                logger.warning(
                    "Student %s no longer exists; credit for session %s not refunded",
                    student_id, session_id,
                )
                outcome = RefundOutcome.NO_PLAN_FOUND
            else:
                outcome = refund_credit(student, session.type)

    logger.info("Student %s removed from session %s (refund: %s)", student_id, session_id, outcome.value)
    return outcome


def cancel_attendance(store: StudioStore, session_id: str, student_id: str) -> Attendee:
    """Mark a booking as cancelled; the seat is freed and the record kept"""
    with store.transaction():
        session = get_class_session_or_raise(store, session_id)
        attendee = session.find_attendee(student_id)
        if attendee is None:
            raise NotFound(f"Student {student_id} has no active booking in session {session_id}")
        attendee.status = "cancelled"

    logger.info("Booking of student %s in session %s cancelled", student_id, session_id)
    return attendee


def seats_left(session: ClassSession) -> int:
    return max(session.max_capacity - session.booked_count, 0)
