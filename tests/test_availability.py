from datetime import date

import pytest

from studio.core.errors import ScheduleCollision, ValidationError
from studio.crud.availabilityCrud import find_conflict, is_available
from studio.crud.classSessionCrud import update_session_status
from studio.crud.enrollmentCrud import enroll


def test_instructor_busy_at_same_slot(store, make_session):
    session = make_session(start_time="9:00")

    assert not is_available(store, "i-2", "2024-01-10", "09:00", "instructor")
    assert is_available(store, "i-2", "2024-01-10", "10:00", "instructor")
    assert is_available(store, "i-2", date(2024, 1, 10), "09:00", "instructor", exclude_session_id=session.id)
    assert is_available(store, "i-1", "2024-01-10", "09:00", "instructor")


def test_cancelled_sessions_do_not_block(store, make_session):
    session = make_session()
    update_session_status(store, session.id, "cancelled")

    assert is_available(store, "i-2", "2024-01-10", "09:00", "instructor")


def test_attendee_conflict(store, make_session):
    session = make_session()
    enroll(store, session.id, "2")

    assert find_conflict(store, "2", "2024-01-10", "09:00", "attendee").id == session.id
    assert is_available(store, "1", "2024-01-10", "09:00", "attendee")


def test_instructor_double_booking_in_another_room(make_session):
    make_session(instructor_id="i-1", type="Pole Dance", room_id="sala-pole")

    with pytest.raises(ScheduleCollision):
        make_session(instructor_id="i-1", type="Telas", room_id="sala-telas")


def test_room_slot_taken_by_another_instructor(make_session):
    make_session(instructor_id="i-2", room_id="sala-yoga")

    with pytest.raises(ScheduleCollision):
        make_session(instructor_id="i-1", type="Yoga", room_id="sala-yoga")


def test_unknown_role(store):
    with pytest.raises(ValidationError):
        find_conflict(store, "1", "2024-01-10", "09:00", "coach")
