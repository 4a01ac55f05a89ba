import logging

import pytest

from studio.core.errors import (
    AlreadyEnrolled,
    CapacityExceeded,
    NoEligiblePlan,
    NotFound,
    ScheduleCollision,
    ValidationError,
)
from studio.crud.classSessionCrud import CreditOutcome, update_session_status
from studio.crud.enrollmentCrud import cancel_attendance, enroll, seats_left, unenroll
from studio.crud.plansCrud import RefundOutcome, process_payment
from studio.crud.studentsCrud import add_student


def yoga_credits(store, student_id="2"):
    return sum(p.credits for p in store.data.find_student(student_id).plans if p.discipline == "Yoga")


def test_enroll_books_attendee_without_debit(store, make_session):
    session = make_session()
    attendee = enroll(store, session.id, "2")

    assert attendee.student_name == "Lucía Gómez"
    assert attendee.status == "booked"
    assert attendee.credit_deducted is False
    assert yoga_credits(store) == 4
    assert store.reload().find_class(session.id).booked_count == 1


def test_capacity_is_never_exceeded(store, make_session):
    session = make_session(max_capacity=2)
    enroll(store, session.id, "2")
    enroll(store, session.id, "3")

    with pytest.raises(CapacityExceeded):
        enroll(store, session.id, "1", attendance_type="courtesy")
    assert store.data.find_class(session.id).booked_count <= 2
    assert seats_left(store.data.find_class(session.id)) == 0


def test_double_enroll_is_rejected(store, make_session):
    session = make_session()
    enroll(store, session.id, "2")

    with pytest.raises(AlreadyEnrolled):
        enroll(store, session.id, "2")


def test_student_double_booking_across_sessions(store, make_session):
    first = make_session()
    second = make_session(instructor_id="i-1", type="Yoga", room_id="sala-gluteos")
    enroll(store, first.id, "2")

    with pytest.raises(ScheduleCollision):
        enroll(store, second.id, "2")


def test_no_matching_plan(store, make_session):
    session = make_session()

    with pytest.raises(NoEligiblePlan):
        enroll(store, session.id, "1")


def test_guest_and_courtesy_skip_plan_check(store, make_session):
    session = make_session()

    assert enroll(store, session.id, "3").student_id == "3"
    assert enroll(store, session.id, "1", attendance_type="courtesy").attendance_type == "courtesy"


def test_missing_references(store, make_session):
    session = make_session()

    with pytest.raises(NotFound):
        enroll(store, "missing", "2")
    with pytest.raises(NotFound):
        enroll(store, session.id, "missing")
    with pytest.raises(ValidationError):
        enroll(store, session.id, "2", attendance_type="vip")


def test_cancel_attendance_frees_seat_and_allows_rebooking(store, make_session):
    session = make_session(max_capacity=1)
    enroll(store, session.id, "2")

    cancelled = cancel_attendance(store, session.id, "2")
    assert cancelled.status == "cancelled"
    assert store.data.find_class(session.id).booked_count == 0

    enroll(store, session.id, "2")
    attendees = store.data.find_class(session.id).attendees
    assert [(a.student_id, a.status) for a in attendees] == [("2", "booked")]

    with pytest.raises(NotFound):
        cancel_attendance(store, session.id, "1")


def test_unenroll_before_completion_keeps_credits(store, make_session):
    session = make_session()
    enroll(store, session.id, "2")

    assert unenroll(store, session.id, "2") is RefundOutcome.NOT_DEDUCTED
    assert yoga_credits(store) == 4
    assert store.data.find_class(session.id).attendees == []


def test_unenroll_after_completion_refunds(store, make_session):
    session = make_session()
    enroll(store, session.id, "2")
    update_session_status(store, session.id, "completed")
    assert yoga_credits(store) == 3

    assert unenroll(store, session.id, "2") is RefundOutcome.REFUNDED
    assert yoga_credits(store) == 4


def test_unenroll_unknown_attendee(store, make_session):
    session = make_session()

    with pytest.raises(NotFound):
        unenroll(store, session.id, "2")


def test_single_credit_yoga_plan_is_removed_on_completion(store, make_session):
    student = add_student(store, name="Paula Ríos", phone="555-0110")
    process_payment(
        store, student.id, amount=15, method="Efectivo", plan_name="Clase Suelta", credits=1, discipline="Yoga"
    )
    session = make_session(max_capacity=5)
    enroll(store, session.id, "2")

    enroll(store, session.id, student.id)
    result = update_session_status(store, session.id, "completed")

    outcome = next(r for r in result.credit_results if r.student_id == student.id)
    assert outcome.outcome is CreditOutcome.DEDUCTED
    assert outcome.plan_removed is True
    assert store.data.find_student(student.id).plans == []

    # The exhausted plan is gone, so there is nothing to give the credit back to
    assert unenroll(store, session.id, student.id) is RefundOutcome.NO_PLAN_FOUND


def test_enrollment_log_is_formatted_lazily(store, make_session, caplog):
    session = make_session()

    with caplog.at_level(logging.INFO, logger="studio.crud.enrollmentCrud"):
        enroll(store, session.id, "2")

    record = next(r for r in caplog.records if r.name == "studio.crud.enrollmentCrud")
    assert record.msg == "Student %s enrolled in session %s (%s), %s/%s booked"
    assert record.args == ("2", session.id, "standard", 1, 5)
    assert record.getMessage() == f"Student 2 enrolled in session {session.id} (standard), 1/5 booked"
