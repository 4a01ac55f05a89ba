"""
GraphQL types for instructor payroll
"""
from datetime import date
from typing import List, Optional

import strawberry

from studio.crud.payrollCrud import PayrollSummary, SessionPay
from studio.graphql.class_sessions.types import ClassSession
from studio.models.payrollModel import InstructorPayment as InstructorPaymentModel


@strawberry.type
class SessionPayLine:
    session: ClassSession
    attendee_count: int
    amount: float

    @staticmethod
    def from_dataclass(data: SessionPay) -> "SessionPayLine":
        return SessionPayLine(
            session=ClassSession.from_model(data.session),
            attendee_count=data.attendee_count,
            amount=data.amount,
        )


@strawberry.type
class PendingPayroll:
    """Unpaid completed/confirmed sessions of an instructor in a period"""
    instructor_id: str
    period_start: date
    period_end: date
    sessions: List[SessionPayLine]
    total_count: int
    total_pay: float
    avg_attendance: float

    @staticmethod
    def from_dataclass(data: PayrollSummary) -> "PendingPayroll":
        return PendingPayroll(
            instructor_id=data.instructor_id,
            period_start=data.period_start,
            period_end=data.period_end,
            sessions=[SessionPayLine.from_dataclass(line) for line in data.sessions],
            total_count=data.total_count,
            total_pay=data.total_pay,
            avg_attendance=data.avg_attendance,
        )


@strawberry.type
class InstructorPayment:
    id: str
    instructor_id: str
    instructor_name: str
    date: date
    amount: float
    period_start: date
    period_end: date
    class_ids: List[str]
    notes: Optional[str]

    @classmethod
    def from_model(cls, payment: InstructorPaymentModel) -> "InstructorPayment":
        return cls(
            id=payment.id,
            instructor_id=payment.instructor_id,
            instructor_name=payment.instructor_name,
            date=payment.date,
            amount=payment.amount,
            period_start=payment.period_start,
            period_end=payment.period_end,
            class_ids=list(payment.class_ids),
            notes=payment.notes,
        )


@strawberry.input
class RecordPaymentInput:
    instructor_id: str
    amount: float
    period_start: date
    period_end: date
    session_ids: List[str]
    notes: Optional[str] = None
    paid_at: Optional[date] = None


@strawberry.type
class PayrollPaymentResponse:
    success: bool
    payment: Optional[InstructorPayment]
    message: str
    error_code: Optional[str] = None


@strawberry.type
class PendingPayrollResponse:
    success: bool
    payroll: Optional[PendingPayroll]
    message: str
    error_code: Optional[str] = None
