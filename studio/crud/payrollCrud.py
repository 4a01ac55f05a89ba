"""
Instructor payroll: per-session pay from rate tiers, pending payroll
aggregation and reversible payment recording.
"""
import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from studio.core.conversions import parse_iso_date
from studio.core.errors import NotFound, ValidationError
from studio.crud.classSessionCrud import get_class_session_or_raise
from studio.crud.instructorsCrud import get_instructor_or_raise
from studio.crud.ratesCrud import find_tier, get_room_rates
from studio.db.store import StudioStore
from studio.models.classModel import PAYABLE_STATUSES, ClassSession
from studio.models.payrollModel import InstructorPayment

logger = logging.getLogger(__name__)


@dataclass
class SessionPay:
    session: ClassSession
    attendee_count: int
    amount: float


@dataclass
class PayrollSummary:
    """Pending payroll of one instructor over a period"""
    instructor_id: str
    period_start: date
    period_end: date
    sessions: List[SessionPay] = field(default_factory=list)
    total_count: int = 0
    total_pay: float = 0
    avg_attendance: float = 0

    @property
    def session_ids(self) -> List[str]:
        return [line.session.id for line in self.sessions]


def calculate_pay(store: StudioStore, session: ClassSession) -> float:
    """Instructor pay for one session"""
    try:
        room_rate = get_room_rates(store, session.room_id)
    except NotFound:
        logger.warning("Session %s uses unknown room %s; paying 0", session.id, session.room_id)
        return 0

    if session.is_private:
        return room_rate.private_rate

    # Courtesy attendees count toward the tier
    tier = find_tier(room_rate.rates, session.booked_count)
    return tier.price if tier else 0


def pending_sessions(
    store: StudioStore,
    instructor_id: str,
    period_start: date,
    period_end: date,
) -> List[ClassSession]:
    """Completed or confirmed sessions of the instructor, unpaid, within the inclusive period"""
    sessions = [
        s for s in store.data.classes
        if s.instructor_id == instructor_id
        and s.status in PAYABLE_STATUSES
        and not s.payment_id
        and period_start <= s.date <= period_end
    ]
    return sorted(sessions, key=lambda s: (s.date, s.start_time))


def compute_pending_payroll(
    store: StudioStore,
    instructor_id: str,
    period_start: date | str,
    period_end: date | str,
) -> PayrollSummary:
    start = parse_iso_date(period_start)
    end = parse_iso_date(period_end)
    if end < start:
        raise ValidationError("Period end is before period start")

    lines = [
        SessionPay(session=s, attendee_count=s.booked_count, amount=calculate_pay(store, s))
        for s in pending_sessions(store, instructor_id, start, end)
    ]
    total_count = len(lines)
    total_attendees = sum(line.attendee_count for line in lines)

    return PayrollSummary(
        instructor_id=instructor_id,
        period_start=start,
        period_end=end,
        sessions=lines,
        total_count=total_count,
        total_pay=sum(line.amount for line in lines),
        avg_attendance=round(total_attendees / total_count, 1) if total_count else 0,
    )


def record_payment(
    store: StudioStore,
    instructor_id: str,
    *,
    amount: float,
    period_start: date | str,
    period_end: date | str,
    session_ids: Sequence[str],
    notes: Optional[str] = None,
    paid_at: Optional[date] = None,
) -> InstructorPayment:
    """Log a payroll payment and link every covered session to it"""
    if amount is None or amount < 0:
        raise ValidationError("Payment amount must be zero or greater")
    if not session_ids:
        raise ValidationError("Select at least one session to pay")
    if len(set(session_ids)) != len(session_ids):
        raise ValidationError("Session list contains duplicates")

    start = parse_iso_date(period_start)
    end = parse_iso_date(period_end)
    if end < start:
        raise ValidationError("Period end is before period start")

    with store.transaction() as data:
        instructor = get_instructor_or_raise(store, instructor_id)
        sessions = [get_class_session_or_raise(store, session_id) for session_id in session_ids]
        for session in sessions:
            if session.instructor_id != instructor_id:
                raise ValidationError(f"Session {session.id} belongs to another instructor")
            if session.payment_id:
                raise ValidationError(f"Session {session.id} is already linked to payment {session.payment_id}")

        payment = InstructorPayment(
            id=str(uuid.uuid4()),
            instructor_id=instructor.id,
            instructor_name=instructor.name,
            date=paid_at or date.today(),
            amount=amount,
            period_start=start,
            period_end=end,
            class_ids=list(session_ids),
            notes=notes,
        )
        data.instructor_payments.append(payment)
        for session in sessions:
            session.payment_id = payment.id

    logger.info(
        "Payroll payment %s of %s recorded for instructor %s (%s sessions)",
        payment.id, amount, instructor_id, len(sessions),
    )
    return payment


def delete_payment(store: StudioStore, payment_id: str) -> InstructorPayment:
    """Remove a payroll payment; its sessions return to the pending pool"""
    with store.transaction() as data:
        payment = data.find_instructor_payment(payment_id)
        if payment is None:
            raise NotFound(f"Instructor payment {payment_id} not found")

        data.instructor_payments = [p for p in data.instructor_payments if p.id != payment_id]
        released = 0
        for session in data.classes:
            if session.payment_id == payment_id:
                session.payment_id = None
                released += 1

    logger.info("Payroll payment %s deleted, %s sessions back to pending", payment_id, released)
    return payment


def list_instructor_payments(store: StudioStore, instructor_id: Optional[str] = None) -> List[InstructorPayment]:
    payments = [
        p for p in store.data.instructor_payments
        if instructor_id is None or p.instructor_id == instructor_id
    ]
    return sorted(payments, key=lambda p: p.date, reverse=True)
