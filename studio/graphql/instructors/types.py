from typing import List, Optional

import strawberry

from studio.crud.instructorsCrud import InstructorUpdate
from studio.models.peopleModel import Instructor as InstructorModel


@strawberry.type
class Instructor:
    id: str
    name: str
    email: str
    phone: str
    bio: str
    specialties: List[str]
    rate_per_class: float

    @classmethod
    def from_model(cls, instructor: InstructorModel) -> "Instructor":
        return cls(
            id=instructor.id,
            name=instructor.name,
            email=instructor.email,
            phone=instructor.phone,
            bio=instructor.bio,
            specialties=list(instructor.specialties),
            rate_per_class=instructor.rate_per_class,
        )


@strawberry.input
class CreateInstructorInput:
    name: str
    specialties: List[str]
    email: str = ""
    phone: str = ""
    bio: str = ""
    rate_per_class: float = 0


@strawberry.input
class UpdateInstructorInput:
    instructor_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    specialties: Optional[List[str]] = None
    rate_per_class: Optional[float] = None

    def to_update(self) -> InstructorUpdate:
        return InstructorUpdate(
            name=self.name,
            email=self.email,
            phone=self.phone,
            bio=self.bio,
            specialties=self.specialties,
            rate_per_class=self.rate_per_class,
        )


@strawberry.type
class InstructorResponse:
    success: bool
    instructor: Optional[Instructor]
    message: str
    error_code: Optional[str] = None
