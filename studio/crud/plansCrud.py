"""
Credit plan ledger.

Plans are owned by a student. Credits are only debited when a session is
completed and refunded when a debited attendee is removed from a session.
"""
import logging
import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Optional, Tuple

from dateutil.relativedelta import relativedelta

from studio.core.catalog import (
    DISCIPLINES,
    GENERAL_DISCIPLINE,
    LEGACY_DISCIPLINE_PAIRS,
    PAYMENT_METHODS,
    PLAN_PRESETS,
    UNLIMITED_PLAN_NAME,
)
from studio.core.errors import NotFound, ValidationError
from studio.db.store import StudioStore
from studio.models.peopleModel import Payment, Plan, Student

logger = logging.getLogger(__name__)


class RefundOutcome(str, Enum):
    REFUNDED = "refunded"
    NO_PLAN_FOUND = "no_plan_found"
    NOT_DEDUCTED = "not_deducted"


@dataclass
class PlanUpdate:
    """Mutable fields of a plan; None leaves the field unchanged"""
    credits: Optional[int] = None
    active: Optional[bool] = None
    expires_at: Optional[date] = None
    clear_expiry: bool = False


def disciplines_match(
    plan_discipline: str,
    session_type: str,
    legacy_pairs: Iterable[Tuple[str, str]] = LEGACY_DISCIPLINE_PAIRS,
) -> bool:
    """Whether a plan bought for plan_discipline can pay for a session_type class"""
    if not plan_discipline or not session_type:
        return False
    if plan_discipline == GENERAL_DISCIPLINE:
        return True
    if plan_discipline == session_type:
        return True
    if plan_discipline in session_type or session_type in plan_discipline:
        return True
    for first, second in legacy_pairs:
        if {plan_discipline, session_type} == {first, second}:
            return True
    return False


def find_eligible_plan(
    student: Student,
    session_type: str,
    on_date: Optional[date] = None,
) -> Optional[Plan]:
    """First plan (list order) that can pay one credit for the session type"""
    for plan in student.plans:
        if plan.is_usable_on(on_date) and disciplines_match(plan.discipline, session_type):
            return plan
    return None


def find_refund_plan(student: Student, session_type: str) -> Optional[Plan]:
    """First matching plan to give a credit back to, regardless of balance"""
    return next(
        (plan for plan in student.plans if plan.active and disciplines_match(plan.discipline, session_type)),
        None,
    )


def debit_credit(student: Student, plan: Plan) -> bool:
    """
    Take one credit from the plan.

    Returns True when the plan ran out and was removed from the student.
    Unlimited plans are kept at zero.
    """
    plan.credits -= 1
    if plan.credits <= 0 and plan.name != UNLIMITED_PLAN_NAME:
        student.plans = [p for p in student.plans if p.id != plan.id]
        logger.info("Plan %s (%s) of student %s exhausted and removed", plan.id, plan.name, student.id)
        return True
    return False


def refund_credit(student: Student, session_type: str) -> RefundOutcome:
    """Give one credit back to the first matching plan; no upper bound"""
    plan = find_refund_plan(student, session_type)
    if plan is None:
        logger.warning("No plan matching '%s' to refund for student %s", session_type, student.id)
        return RefundOutcome.NO_PLAN_FOUND
    plan.credits += 1
    return RefundOutcome.REFUNDED


def get_student_or_raise(store: StudioStore, student_id: str) -> Student:
    student = store.data.find_student(student_id)
    if student is None:
        raise NotFound(f"Student {student_id} not found")
    return student


def get_student_plan_or_raise(student: Student, plan_id: str) -> Plan:
    plan = next((p for p in student.plans if p.id == plan_id), None)
    if plan is None:
        raise NotFound(f"Plan {plan_id} not found for student {student.id}")
    return plan


def process_payment(
    store: StudioStore,
    student_id: str,
    *,
    amount: float,
    method: str,
    plan_name: str,
    discipline: str,
    credits: Optional[int] = None,
    paid_at: Optional[date] = None,
    valid_months: Optional[int] = None,
) -> Tuple[Payment, Plan]:
    """
    Record a student payment and add the plan it buys.

    Without explicit credits the preset for plan_name applies.
    """
    if not plan_name:
        raise ValidationError("Plan name is required")
    if amount is None or amount < 0:
        raise ValidationError("Payment amount must be zero or greater")
    if method not in PAYMENT_METHODS:
        raise ValidationError(f"Unknown payment method '{method}'")
    if credits is None:
        credits = PLAN_PRESETS.get(plan_name)
    if credits is None or credits < 1:
        raise ValidationError("A plan must grant at least one credit")
    if discipline not in DISCIPLINES and discipline != GENERAL_DISCIPLINE:
        raise ValidationError(f"Unknown discipline '{discipline}'")

    paid_on = paid_at or date.today()
    expires_at = paid_on + relativedelta(months=valid_months) if valid_months else None

    with store.transaction():
        student = get_student_or_raise(store, student_id)
        payment = Payment(
            id=str(uuid.uuid4()),
            date=paid_on,
            amount=amount,
            method=method,
            concept=plan_name,
        )
        plan = Plan(
            id=str(uuid.uuid4()),
            discipline=discipline,
            credits=credits,
            active=True,
            name=plan_name,
            purchased_at=paid_on,
            expires_at=expires_at,
        )
        student.payments.append(payment)
        student.plans.append(plan)
        student.plan_type = plan_name

    logger.info(
        "Payment of %s (%s) recorded for student %s: %s x%s %s",
        amount, method, student_id, plan_name, credits, discipline,
    )
    return payment, plan


def update_student_plan(
    store: StudioStore,
    student_id: str,
    plan_id: str,
    changes: PlanUpdate,
) -> Plan:
    if changes.credits is not None and changes.credits < 0:
        raise ValidationError("Credits cannot be negative")

    with store.transaction():
        student = get_student_or_raise(store, student_id)
        plan = get_student_plan_or_raise(student, plan_id)
        if changes.credits is not None:
            plan.credits = changes.credits
        if changes.active is not None:
            plan.active = changes.active
        if changes.clear_expiry:
            plan.expires_at = None
        elif changes.expires_at is not None:
            plan.expires_at = changes.expires_at

    return plan


def delete_student_plan(store: StudioStore, student_id: str, plan_id: str) -> None:
    with store.transaction():
        student = get_student_or_raise(store, student_id)
        get_student_plan_or_raise(student, plan_id)
        student.plans = [p for p in student.plans if p.id != plan_id]

    logger.info("Plan %s deleted from student %s", plan_id, student_id)


def available_credits(student: Student, session_type: str, on_date: Optional[date] = None) -> int:
    """Total usable credits for a discipline (unlimited plans count as their sentinel)"""
    return sum(
        plan.credits for plan in student.plans
        if plan.is_usable_on(on_date) and disciplines_match(plan.discipline, session_type)
    )
