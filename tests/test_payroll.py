from datetime import date

import pytest

from studio.core.errors import NotFound, ValidationError
from studio.crud.classSessionCrud import ClassSessionUpdate, update_class_session, update_session_status
from studio.crud.enrollmentCrud import enroll
from studio.crud.payrollCrud import (
    calculate_pay,
    compute_pending_payroll,
    delete_payment,
    list_instructor_payments,
    record_payment,
)
from studio.crud.ratesCrud import update_room_rate
from studio.models.settingsModel import RateTier

PERIOD = ("2024-01-01", "2024-01-31")


@pytest.fixture
def pole_session(store, make_session):
    session = make_session(instructor_id="i-1", type="Pole Dance", room_id="sala-pole")
    enroll(store, session.id, "1")
    enroll(store, session.id, "3")
    enroll(store, session.id, "2", attendance_type="courtesy")
    return store.data.find_class(session.id)


def test_tier_pay_for_three_attendees(store, pole_session):
    assert pole_session.booked_count == 3
    assert calculate_pay(store, pole_session) == 15


def test_private_session_pays_flat_rate(store, pole_session):
    session = update_class_session(store, pole_session.id, ClassSessionUpdate(is_private=True)).session

    assert calculate_pay(store, session) == 25


def test_no_matching_tier_pays_zero(store, make_session):
    session = make_session(instructor_id="i-1", type="Pole Dance", room_id="sala-pole")

    assert calculate_pay(store, session) == 0


def test_unknown_room_pays_zero(store, pole_session):
    with store.transaction() as data:
        data.find_class(pole_session.id).room_id = "sala-vieja"

    assert calculate_pay(store, store.data.find_class(pole_session.id)) == 0


def test_rate_override_changes_pay(store, pole_session):
    update_room_rate(store, "sala-pole", private_rate=40, rates=[RateTier(min=1, max=None, price=30)])

    assert calculate_pay(store, pole_session) == 30


def test_pending_payroll_only_counts_unpaid_payable_sessions(store, make_session, pole_session):
    scheduled = make_session(instructor_id="i-1", type="Telas", room_id="sala-telas", start_time="11:00")
    confirmed = make_session(instructor_id="i-1", type="Telas", room_id="sala-telas", start_time="12:00")
    outside = make_session(
        instructor_id="i-1", type="Telas", room_id="sala-telas", session_date=date(2024, 2, 1)
    )
    update_session_status(store, pole_session.id, "completed")
    update_session_status(store, confirmed.id, "confirmed")
    update_session_status(store, outside.id, "completed")

    summary = compute_pending_payroll(store, "i-1", *PERIOD)

    assert summary.session_ids == [pole_session.id, confirmed.id]
    assert scheduled.id not in summary.session_ids
    assert summary.total_count == 2
    assert summary.total_pay == 15
    assert summary.avg_attendance == 1.5


def test_pending_payroll_rejects_inverted_period(store):
    with pytest.raises(ValidationError):
        compute_pending_payroll(store, "i-1", "2024-02-01", "2024-01-01")


def test_record_then_delete_payment_round_trip(store, pole_session):
    update_session_status(store, pole_session.id, "completed")
    pending = compute_pending_payroll(store, "i-1", *PERIOD)

    payment = record_payment(
        store,
        "i-1",
        amount=pending.total_pay,
        period_start=PERIOD[0],
        period_end=PERIOD[1],
        session_ids=pending.session_ids,
        paid_at=date(2024, 2, 1),
    )

    assert payment.instructor_name == "Carla Ruiz"
    assert store.data.find_class(pole_session.id).payment_id == payment.id
    assert compute_pending_payroll(store, "i-1", *PERIOD).session_ids == []
    assert [p.id for p in list_instructor_payments(store, "i-1")] == [payment.id]

    delete_payment(store, payment.id)

    assert store.data.find_class(pole_session.id).payment_id is None
    assert compute_pending_payroll(store, "i-1", *PERIOD).session_ids == [pole_session.id]
    assert list_instructor_payments(store) == []


def test_record_payment_validation(store, make_session, pole_session):
    other = make_session(instructor_id="i-2", start_time="10:00")
    record_payment(store, "i-1", amount=15, period_start=PERIOD[0], period_end=PERIOD[1], session_ids=[pole_session.id])

    with pytest.raises(ValidationError):
        record_payment(store, "i-1", amount=15, period_start=PERIOD[0], period_end=PERIOD[1], session_ids=[pole_session.id])
    with pytest.raises(ValidationError):
        record_payment(store, "i-1", amount=15, period_start=PERIOD[0], period_end=PERIOD[1], session_ids=[other.id])
    with pytest.raises(ValidationError):
        record_payment(store, "i-2", amount=10, period_start=PERIOD[0], period_end=PERIOD[1], session_ids=[other.id, other.id])
    with pytest.raises(ValidationError):
        record_payment(store, "i-2", amount=-1, period_start=PERIOD[0], period_end=PERIOD[1], session_ids=[other.id])
    with pytest.raises(ValidationError):
        record_payment(store, "i-2", amount=10, period_start=PERIOD[0], period_end=PERIOD[1], session_ids=[])
    with pytest.raises(NotFound):
        record_payment(store, "i-2", amount=10, period_start=PERIOD[0], period_end=PERIOD[1], session_ids=["missing"])

    assert len(store.data.instructor_payments) == 1


def test_delete_unknown_payment(store):
    with pytest.raises(NotFound):
        delete_payment(store, "missing")
