from typing import List, Optional

import strawberry
from strawberry.types import Info

from studio.crud.instructorsCrud import list_instructors
from .types import Instructor


@strawberry.type
class InstructorQueries:
    @strawberry.field
    async def instructor(self, info: Info, instructor_id: str) -> Optional[Instructor]:
        instructor = info.context.store.data.find_instructor(instructor_id)
        return Instructor.from_model(instructor) if instructor else None

    @strawberry.field
    async def instructors(self, info: Info, specialty: Optional[str] = None) -> List[Instructor]:
        """All instructors, optionally only those teaching a specialty"""
        return [Instructor.from_model(i) for i in list_instructors(info.context.store, specialty)]
