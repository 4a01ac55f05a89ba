"""
Class session models: a one-hour session in a room and its attendee list
"""
from datetime import date
from typing import List, Literal, Optional

from pydantic import Field

from studio.models.baseModel import DocumentModel

SessionStatus = Literal["scheduled", "confirmed", "rescheduled", "cancelled", "completed"]
AttendeeStatus = Literal["booked", "cancelled"]
AttendanceType = Literal["standard", "courtesy"]

SESSION_STATUSES = ("scheduled", "confirmed", "rescheduled", "cancelled", "completed")
PENDING_STATUSES = ("scheduled", "confirmed", "rescheduled")
PAYABLE_STATUSES = ("completed", "confirmed")
ATTENDANCE_TYPES = ("standard", "courtesy")


class Attendee(DocumentModel):
    student_id: str
    student_name: str
    status: AttendeeStatus = "booked"
    attendance_type: AttendanceType = "standard"
    credit_deducted: bool = False

    @property
    def is_booked(self) -> bool:
        return self.status == "booked"


class ClassSession(DocumentModel):
    id: str
    instructor_id: str
    instructor_name: str = ""
    date: date
    start_time: str
    end_time: str
    status: SessionStatus = "scheduled"
    type: str
    room_id: str
    max_capacity: int
    attendees: List[Attendee] = Field(default_factory=list)
    is_private: bool = False
    payment_id: Optional[str] = None
    notes: str = ""

    @property
    def booked_attendees(self) -> List[Attendee]:
        return [attendee for attendee in self.attendees if attendee.is_booked]

    @property
    def booked_count(self) -> int:
        return len(self.booked_attendees)

    @property
    def is_cancelled(self) -> bool:
        return self.status == "cancelled"

    def find_attendee(self, student_id: str, booked_only: bool = True) -> Optional[Attendee]:
        for attendee in self.attendees:
            if attendee.student_id == student_id and (attendee.is_booked or not booked_only):
                return attendee
        return None
