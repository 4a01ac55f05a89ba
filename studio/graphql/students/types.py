"""
GraphQL types for Students, their plans, payments and history
"""
from datetime import date as Date, datetime
from typing import List, Optional

import strawberry

from studio.crud.plansCrud import PlanUpdate
from studio.crud.studentsCrud import StudentMedicalUpdate, StudentProfileUpdate
from studio.models.peopleModel import (
    HistoryEntry as HistoryEntryModel,
    Payment as PaymentModel,
    Plan as PlanModel,
    Student as StudentModel,
)


@strawberry.type
class Plan:
    id: str
    discipline: str
    credits: int
    active: bool
    name: str
    purchased_at: Optional[Date]
    expires_at: Optional[Date]
    is_unlimited: bool

    @classmethod
    def from_model(cls, plan: PlanModel) -> "Plan":
        return cls(
            id=plan.id,
            discipline=plan.discipline,
            credits=plan.credits,
            active=plan.active,
            name=plan.name,
            purchased_at=plan.purchased_at,
            expires_at=plan.expires_at,
            is_unlimited=plan.is_unlimited,
        )


@strawberry.type
class Payment:
    id: str
    date: Date
    amount: float
    method: str
    concept: str

    @classmethod
    def from_model(cls, payment: PaymentModel) -> "Payment":
        return cls(
            id=payment.id,
            date=payment.date,
            amount=payment.amount,
            method=payment.method,
            concept=payment.concept,
        )


@strawberry.type
class HistoryEntry:
    id: str
    date: Date
    activity: str
    notes: str
    cost: float

    @classmethod
    def from_model(cls, entry: HistoryEntryModel) -> "HistoryEntry":
        return cls(id=entry.id, date=entry.date, activity=entry.activity, notes=entry.notes, cost=entry.cost)


@strawberry.type
class Student:
    """Student GraphQL type"""
    id: str
    name: str
    phone: str
    email: str
    status: str
    emergency_contact: str
    medical_info: str
    allergies: str
    injuries: str
    conditions: str
    sports_info: str
    plan_type: str
    created_at: Optional[datetime]
    plans: List[Plan]
    payments: List[Payment]
    history: List[HistoryEntry]

    @classmethod
    def from_model(cls, student: StudentModel) -> "Student":
        return cls(
            id=student.id,
            name=student.name,
            phone=student.phone,
            email=student.email,
            status=student.status,
            emergency_contact=student.emergency_contact,
            medical_info=student.medical_info,
            allergies=student.allergies,
            injuries=student.injuries,
            conditions=student.conditions,
            sports_info=student.sports_info,
            plan_type=student.plan_type,
            created_at=student.created_at,
            plans=[Plan.from_model(p) for p in student.plans],
            payments=[Payment.from_model(p) for p in student.payments],
            history=[HistoryEntry.from_model(h) for h in student.history],
        )


# Input types for mutations
@strawberry.input
class CreateStudentInput:
    name: str
    phone: str
    email: str = ""
    status: str = "active"
    emergency_contact: str = ""
    medical_info: str = ""
    allergies: str = ""
    injuries: str = ""
    conditions: str = ""
    sports_info: str = ""


@strawberry.input
class UpdateStudentProfileInput:
    """Fields left null are not modified"""
    student_id: str
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    emergency_contact: Optional[str] = None
    status: Optional[str] = None

    def to_update(self) -> StudentProfileUpdate:
        return StudentProfileUpdate(
            name=self.name,
            phone=self.phone,
            email=self.email,
            emergency_contact=self.emergency_contact,
            status=self.status,
        )


@strawberry.input
class UpdateStudentMedicalInput:
    student_id: str
    medical_info: Optional[str] = None
    allergies: Optional[str] = None
    injuries: Optional[str] = None
    conditions: Optional[str] = None
    sports_info: Optional[str] = None

    def to_update(self) -> StudentMedicalUpdate:
        return StudentMedicalUpdate(
            medical_info=self.medical_info,
            allergies=self.allergies,
            injuries=self.injuries,
            conditions=self.conditions,
            sports_info=self.sports_info,
        )


@strawberry.input
class ProcessPaymentInput:
    """A payment that buys a credit plan; credits default to the plan preset"""
    student_id: str
    amount: float
    method: str
    plan_name: str
    discipline: str
    credits: Optional[int] = None
    paid_at: Optional[Date] = None
    valid_months: Optional[int] = None


@strawberry.input
class UpdatePlanInput:
    student_id: str
    plan_id: str
    credits: Optional[int] = None
    active: Optional[bool] = None
    expires_at: Optional[Date] = None
    clear_expiry: bool = False

    def to_update(self) -> PlanUpdate:
        return PlanUpdate(
            credits=self.credits,
            active=self.active,
            expires_at=self.expires_at,
            clear_expiry=self.clear_expiry,
        )


@strawberry.input
class AddHistoryInput:
    student_id: str
    activity: str
    cost: float
    notes: str = ""
    date: Optional[Date] = None


# Response types
@strawberry.type
class StudentResponse:
    """Response for student operations"""
    success: bool
    student: Optional[Student]
    message: str
    error_code: Optional[str] = None


@strawberry.type
class PaymentResponse:
    success: bool
    payment: Optional[Payment]
    plan: Optional[Plan]
    message: str
    error_code: Optional[str] = None


@strawberry.type
class StudentsResponse:
    students: List[Student]
    total_count: int
