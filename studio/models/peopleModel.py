"""
People models: students (with their plans, payments and history) and instructors
"""
from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field

from studio.core.catalog import UNLIMITED_CREDITS_THRESHOLD, UNLIMITED_PLAN_NAME
from studio.models.baseModel import DocumentModel

StudentStatus = Literal["active", "inactive", "guest"]


class Plan(DocumentModel):
    """Prepaid credit plan owned by a student"""

    id: str
    discipline: str
    credits: int
    active: bool = True
    name: str
    purchased_at: Optional[date] = None
    expires_at: Optional[date] = None

    @property
    def is_unlimited(self) -> bool:
        return self.name == UNLIMITED_PLAN_NAME or self.credits >= UNLIMITED_CREDITS_THRESHOLD

    def is_usable_on(self, on_date: Optional[date] = None) -> bool:
        if not self.active or self.credits < 1:
            return False
        if on_date and self.expires_at and self.expires_at < on_date:
            return False
        return True


class Payment(DocumentModel):
    """Student payment, append-only"""

    id: str
    date: date
    amount: float
    method: str
    concept: str


class HistoryEntry(DocumentModel):
    id: str
    date: date
    activity: str
    notes: str = ""
    cost: float = 0


class Student(DocumentModel):
    id: str
    name: str
    phone: str
    email: str = ""
    status: StudentStatus = "active"
    emergency_contact: str = ""
    medical_info: str = ""
    allergies: str = ""
    injuries: str = ""
    conditions: str = ""
    sports_info: str = ""
    plan_type: str = "Sin Plan"
    plans: List[Plan] = Field(default_factory=list)
    payments: List[Payment] = Field(default_factory=list)
    history: List[HistoryEntry] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @property
    def is_guest(self) -> bool:
        return self.status == "guest"


class Instructor(DocumentModel):
    id: str
    name: str
    email: str = ""
    phone: str = ""
    bio: str = ""
    specialties: List[str] = Field(default_factory=list)
    rate_per_class: float = 0
