"""
GraphQL queries for Students
"""
from datetime import date
from typing import Optional

import strawberry
from strawberry.types import Info

from studio.crud.plansCrud import available_credits
from studio.crud.studentsCrud import get_student, list_students
from .types import Student, StudentsResponse


@strawberry.type
class StudentQueries:
    @strawberry.field
    async def student(self, info: Info, student_id: str) -> Optional[Student]:
        student = get_student(info.context.store, student_id)
        if student:
            return Student.from_model(student)
        return None

    @strawberry.field
    async def students(
        self,
        info: Info,
        search: Optional[str] = None,
        status: Optional[str] = None,
    ) -> StudentsResponse:
        """Directory listing, filtered by name/email/phone substring and status"""
        students = list_students(info.context.store, search=search, status=status)
        return StudentsResponse(
            students=[Student.from_model(s) for s in students],
            total_count=len(students),
        )

    @strawberry.field
    async def student_credits(
        self,
        info: Info,
        student_id: str,
        discipline: str,
        on_date: Optional[date] = None,
    ) -> int:
        """Usable credits the student holds for a discipline"""
        student = get_student(info.context.store, student_id)
        if student is None:
            return 0
        return available_credits(student, discipline, on_date or date.today())
