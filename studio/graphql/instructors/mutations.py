"""
GraphQL mutations for Instructors
"""
import strawberry
from strawberry.types import Info

from studio.core.errors import StudioError
from studio.crud.instructorsCrud import add_instructor, delete_instructor, update_instructor
from .types import CreateInstructorInput, Instructor, InstructorResponse, UpdateInstructorInput


@strawberry.type
class InstructorMutations:
    @strawberry.mutation
    async def create_instructor(self, info: Info, input: CreateInstructorInput) -> InstructorResponse:
        store = info.context.store

        try:
            instructor = add_instructor(
                store,
                name=input.name,
                specialties=input.specialties,
                email=input.email,
                phone=input.phone,
                bio=input.bio,
                rate_per_class=input.rate_per_class,
            )
            return InstructorResponse(
                success=True,
                instructor=Instructor.from_model(instructor),
                message="Instructora creada"
            )
        except StudioError as e:
            return InstructorResponse(success=False, instructor=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def update_instructor(self, info: Info, input: UpdateInstructorInput) -> InstructorResponse:
        store = info.context.store

        try:
            instructor = update_instructor(store, input.instructor_id, input.to_update())
            return InstructorResponse(
                success=True,
                instructor=Instructor.from_model(instructor),
                message="Instructora actualizada"
            )
        except StudioError as e:
            return InstructorResponse(success=False, instructor=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def delete_instructor(self, info: Info, instructor_id: str) -> InstructorResponse:
        """Sessions already taught keep the instructor name they were created with"""
        store = info.context.store

        try:
            delete_instructor(store, instructor_id)
            return InstructorResponse(success=True, instructor=None, message="Instructora eliminada")
        except StudioError as e:
            return InstructorResponse(success=False, instructor=None, message=str(e), error_code=e.code)
