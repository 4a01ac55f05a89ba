import logging
import uuid
from dataclasses import dataclass
from typing import List, Optional

from studio.core.catalog import DISCIPLINES
from studio.core.errors import NotFound, ValidationError
from studio.db.store import StudioStore
from studio.models.peopleModel import Instructor

logger = logging.getLogger(__name__)


@dataclass
class InstructorUpdate:
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    specialties: Optional[List[str]] = None
    rate_per_class: Optional[float] = None


def _validate(name: Optional[str], specialties: Optional[List[str]]) -> None:
    if name is not None and not name.strip():
        raise ValidationError("Instructor name is required")
    if specialties is not None and len(specialties) == 0:
        raise ValidationError("Select at least one specialty")
    unknown = [s for s in specialties or [] if s not in DISCIPLINES]
    if unknown:
        raise ValidationError(f"Unknown specialties: {', '.join(unknown)}")


def get_instructor_or_raise(store: StudioStore, instructor_id: str) -> Instructor:
    instructor = store.data.find_instructor(instructor_id)
    if instructor is None:
        raise NotFound(f"Instructor {instructor_id} not found")
    return instructor


def list_instructors(store: StudioStore, specialty: Optional[str] = None) -> List[Instructor]:
    if specialty:
        return [i for i in store.data.instructors if specialty in i.specialties]
    return list(store.data.instructors)


def add_instructor(
    store: StudioStore,
    *,
    name: str,
    specialties: List[str],
    email: str = "",
    phone: str = "",
    bio: str = "",
    rate_per_class: float = 0,
) -> Instructor:
    _validate(name or "", specialties)

    instructor = Instructor(
        id=str(uuid.uuid4()),
        name=name.strip(),
        email=email,
        phone=phone,
        bio=bio,
        specialties=list(specialties),
        rate_per_class=rate_per_class,
    )
    with store.transaction() as data:
        data.instructors.append(instructor)

    logger.info("Instructor %s created (%s)", instructor.id, ', '.join(specialties))
    return instructor


def update_instructor(store: StudioStore, instructor_id: str, changes: InstructorUpdate) -> Instructor:
    _validate(changes.name, changes.specialties)

    with store.transaction():
        instructor = get_instructor_or_raise(store, instructor_id)
        if changes.name is not None:
            instructor.name = changes.name.strip()
        if changes.email is not None:
            instructor.email = changes.email
        if changes.phone is not None:
            instructor.phone = changes.phone
        if changes.bio is not None:
            instructor.bio = changes.bio
        if changes.specialties is not None:
            instructor.specialties = list(changes.specialties)
        if changes.rate_per_class is not None:
            instructor.rate_per_class = changes.rate_per_class

    return instructor


def delete_instructor(store: StudioStore, instructor_id: str) -> None:
    with store.transaction() as data:
        get_instructor_or_raise(store, instructor_id)
        data.instructors = [i for i in data.instructors if i.id != instructor_id]

    logger.info("Instructor %s deleted", instructor_id)
