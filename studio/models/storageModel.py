"""
The persisted studio document and the key-value row that stores it
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import Field
from sqlalchemy import String, Text, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from studio.db.database import Base
from studio.models.baseModel import DocumentModel
from studio.models.classModel import ClassSession
from studio.models.payrollModel import InstructorPayment
from studio.models.peopleModel import Instructor, Student
from studio.models.settingsModel import StudioSettings


class StudioData(DocumentModel):
    """Whole application state, loaded and written back wholesale"""

    students: List[Student] = Field(default_factory=list)
    instructors: List[Instructor] = Field(default_factory=list)
    classes: List[ClassSession] = Field(default_factory=list)
    instructor_payments: List[InstructorPayment] = Field(default_factory=list)
    settings: StudioSettings = Field(default_factory=StudioSettings)

    def find_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self.students if s.id == student_id), None)

    def find_instructor(self, instructor_id: str) -> Optional[Instructor]:
        return next((i for i in self.instructors if i.id == instructor_id), None)

    def find_class(self, session_id: str) -> Optional[ClassSession]:
        return next((c for c in self.classes if c.id == session_id), None)

    def find_instructor_payment(self, payment_id: str) -> Optional[InstructorPayment]:
        return next((p for p in self.instructor_payments if p.id == payment_id), None)


class KeyValueEntry(Base):
    """Namespaced blob storage row"""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(120), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
