"""
Student directory operations: profile, medical record and activity history
"""
import logging
import uuid
from dataclasses import dataclass, fields
from datetime import date, datetime, timezone
from typing import List, Optional

from studio.core.errors import NotFound, ValidationError
from studio.crud.plansCrud import get_student_or_raise
from studio.db.store import StudioStore
from studio.models.peopleModel import HistoryEntry, Student

logger = logging.getLogger(__name__)

STUDENT_STATUSES = ("active", "inactive", "guest")


@dataclass
class StudentProfileUpdate:
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    emergency_contact: Optional[str] = None
    status: Optional[str] = None


@dataclass
class StudentMedicalUpdate:
    medical_info: Optional[str] = None
    allergies: Optional[str] = None
    injuries: Optional[str] = None
    conditions: Optional[str] = None
    sports_info: Optional[str] = None


def list_students(store: StudioStore, search: Optional[str] = None, status: Optional[str] = None) -> List[Student]:
    students = store.data.students
    if status:
        students = [s for s in students if s.status == status]
    if search:
        term = search.lower()
        students = [
            s for s in students
            if term in s.name.lower() or term in s.email.lower() or term in s.phone.lower()
        ]
    return list(students)


def get_student(store: StudioStore, student_id: str) -> Optional[Student]:
    return store.data.find_student(student_id)


def add_student(
    store: StudioStore,
    *,
    name: str,
    phone: str,
    email: str = "",
    status: str = "active",
    emergency_contact: str = "",
    medical_info: str = "",
    allergies: str = "",
    injuries: str = "",
    conditions: str = "",
    sports_info: str = "",
    plan_type: str = "Sin Plan",
) -> Student:
    if not name or not name.strip() or not phone or not phone.strip():
        raise ValidationError("Name and phone are required")
    if status not in STUDENT_STATUSES:
        raise ValidationError(f"Unknown student status '{status}'")

    student = Student(
        id=str(uuid.uuid4()),
        name=name.strip(),
        phone=phone.strip(),
        email=email.strip(),
        status=status,
        emergency_contact=emergency_contact,
        medical_info=medical_info,
        allergies=allergies,
        injuries=injuries,
        conditions=conditions,
        sports_info=sports_info,
        plan_type=plan_type,
        created_at=datetime.now(timezone.utc),
    )
    with store.transaction() as data:
        data.students.append(student)

    logger.info("Student %s registered", student.id)
    return student


def update_student(
    store: StudioStore,
    student_id: str,
    changes: StudentProfileUpdate | StudentMedicalUpdate,
) -> Student:
    """Apply a profile or medical update; unset fields are left untouched"""
    values = {f.name: getattr(changes, f.name) for f in fields(changes) if getattr(changes, f.name) is not None}
    if "name" in values and not values["name"].strip():
        raise ValidationError("Name cannot be empty")
    if "phone" in values and not values["phone"].strip():
        raise ValidationError("Phone cannot be empty")
    if "status" in values and values["status"] not in STUDENT_STATUSES:
        raise ValidationError(f"Unknown student status '{values['status']}'")

    with store.transaction():
        student = get_student_or_raise(store, student_id)
        for field_name, value in values.items():
            setattr(student, field_name, value)

    logger.info("Student %s updated: %s", student_id, sorted(values))
    return student


def delete_student(store: StudioStore, student_id: str) -> None:
    """Remove the student; existing session attendee records are kept as-is"""
    with store.transaction() as data:
        get_student_or_raise(store, student_id)
        data.students = [s for s in data.students if s.id != student_id]

    logger.info("Student %s deleted", student_id)


def append_history(student: Student, *, activity: str, notes: str, cost: float, entry_date: date) -> HistoryEntry:
    entry = HistoryEntry(
        id=str(uuid.uuid4()),
        date=entry_date,
        activity=activity,
        notes=notes,
        cost=cost,
    )
    student.history.append(entry)
    return entry


def add_history_entry(
    store: StudioStore,
    student_id: str,
    *,
    activity: str,
    cost: float,
    notes: str = "",
    entry_date: Optional[date] = None,
) -> HistoryEntry:
    if not activity or cost is None:
        raise ValidationError("Activity and cost are required")
    if cost < 0:
        raise ValidationError("Cost must be zero or greater")

    with store.transaction():
        student = get_student_or_raise(store, student_id)
        entry = append_history(
            student,
            activity=activity,
            notes=notes,
            cost=cost,
            entry_date=entry_date or date.today(),
        )
    return entry


def delete_history_entry(store: StudioStore, student_id: str, entry_id: str) -> None:
    with store.transaction():
        student = get_student_or_raise(store, student_id)
        if not any(e.id == entry_id for e in student.history):
            raise NotFound(f"History entry {entry_id} not found")
        student.history = [e for e in student.history if e.id != entry_id]
