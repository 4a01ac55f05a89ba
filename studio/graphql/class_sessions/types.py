"""
GraphQL types for Class Sessions
"""
from datetime import date as Date
from typing import List, Optional

import strawberry

from studio.crud.classSessionCrud import AttendeeCreditResult, ClassSessionUpdate
from studio.models.classModel import Attendee as AttendeeModel, ClassSession as ClassSessionModel


@strawberry.type
class Attendee:
    student_id: str
    student_name: str
    status: str
    attendance_type: str
    credit_deducted: bool

    @classmethod
    def from_model(cls, attendee: AttendeeModel) -> "Attendee":
        return cls(
            student_id=attendee.student_id,
            student_name=attendee.student_name,
            status=attendee.status,
            attendance_type=attendee.attendance_type,
            credit_deducted=attendee.credit_deducted,
        )


@strawberry.type
class ClassSession:
    """Class Session GraphQL type"""
    id: str
    instructor_id: str
    instructor_name: str
    date: Date
    start_time: str
    end_time: str
    status: str
    type: str
    room_id: str
    max_capacity: int
    booked_count: int
    available_spots: int
    is_private: bool
    payment_id: Optional[str]
    notes: str
    attendees: List[Attendee]

    @classmethod
    def from_model(cls, session: ClassSessionModel) -> "ClassSession":
        return cls(
            id=session.id,
            instructor_id=session.instructor_id,
            instructor_name=session.instructor_name,
            date=session.date,
            start_time=session.start_time,
            end_time=session.end_time,
            status=session.status,
            type=session.type,
            room_id=session.room_id,
            max_capacity=session.max_capacity,
            booked_count=session.booked_count,
            available_spots=max(session.max_capacity - session.booked_count, 0),
            is_private=session.is_private,
            payment_id=session.payment_id,
            notes=session.notes,
            attendees=[Attendee.from_model(a) for a in session.attendees],
        )


@strawberry.type
class CreditResult:
    """Per-attendee credit outcome of a completion"""
    student_id: str
    outcome: str
    plan_id: Optional[str]
    plan_removed: bool

    @classmethod
    def from_data(cls, data: AttendeeCreditResult) -> "CreditResult":
        return cls(
            student_id=data.student_id,
            outcome=data.outcome.value,
            plan_id=data.plan_id,
            plan_removed=data.plan_removed,
        )


# Input types for mutations and queries
@strawberry.input
class CreateClassSessionInput:
    """Input for scheduling a class session"""
    date: Date
    start_time: str
    room_id: str
    max_capacity: int
    instructor_id: Optional[str] = None
    type: Optional[str] = None
    is_private: bool = False
    status: str = "scheduled"
    notes: str = ""


@strawberry.input
class UpdateClassSessionInput:
    """Fields left null are not modified"""
    session_id: str
    instructor_id: Optional[str] = None
    date: Optional[Date] = None
    start_time: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    room_id: Optional[str] = None
    max_capacity: Optional[int] = None
    is_private: Optional[bool] = None
    notes: Optional[str] = None

    def to_update(self) -> ClassSessionUpdate:
        return ClassSessionUpdate(
            instructor_id=self.instructor_id,
            session_date=self.date,
            start_time=self.start_time,
            status=self.status,
            type=self.type,
            room_id=self.room_id,
            max_capacity=self.max_capacity,
            is_private=self.is_private,
            notes=self.notes,
        )


@strawberry.input
class EnrollInput:
    session_id: str
    student_id: str
    attendance_type: str = "standard"


@strawberry.input
class GetClassSessionsInput:
    """Input for filtering class sessions"""
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    instructor_id: Optional[str] = None
    room_id: Optional[str] = None
    student_id: Optional[str] = None
    status: Optional[str] = None


# Response types
@strawberry.type
class ClassSessionResponse:
    """Response for class session operations"""
    success: bool
    session: Optional[ClassSession]
    message: str
    error_code: Optional[str] = None
    credit_results: List[CreditResult] = strawberry.field(default_factory=list)


@strawberry.type
class ClassSessionsResponse:
    """Response for class sessions query"""
    sessions: List[ClassSession]
    total_count: int


@strawberry.type
class EnrollmentResponse:
    success: bool
    attendee: Optional[Attendee]
    message: str
    error_code: Optional[str] = None
    refund: Optional[str] = None
