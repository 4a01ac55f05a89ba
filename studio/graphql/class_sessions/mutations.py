"""
GraphQL mutations for Class Sessions
"""
import logging

import strawberry
from strawberry.types import Info

from studio.core.errors import StudioError
from studio.crud.classSessionCrud import (
    create_class_session,
    delete_class_session,
    update_class_session,
    update_session_status,
)
from studio.crud.enrollmentCrud import cancel_attendance, enroll, unenroll
from .types import (
    Attendee,
    ClassSession,
    ClassSessionResponse,
    CreateClassSessionInput,
    CreditResult,
    EnrollInput,
    EnrollmentResponse,
    UpdateClassSessionInput,
)

logger = logging.getLogger(__name__)


@strawberry.type
class ClassSessionMutations:
    """Class Session mutations"""

    @strawberry.mutation
    async def create_class_session(self, info: Info, input: CreateClassSessionInput) -> ClassSessionResponse:
        """Schedule a new class session"""
        store = info.context.store

        try:
            session = create_class_session(
                store,
                instructor_id=input.instructor_id,
                session_date=input.date,
                start_time=input.start_time,
                type=input.type,
                room_id=input.room_id,
                max_capacity=input.max_capacity,
                is_private=input.is_private,
                status=input.status,
                notes=input.notes,
            )
            return ClassSessionResponse(
                success=True,
                session=ClassSession.from_model(session),
                message="Clase agendada"
            )
        except StudioError as e:
            return ClassSessionResponse(success=False, session=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def update_class_session(self, info: Info, input: UpdateClassSessionInput) -> ClassSessionResponse:
        """Edit a session; completing it debits attendee credits"""
        store = info.context.store

        try:
            result = update_class_session(store, input.session_id, input.to_update())
            return ClassSessionResponse(
                success=True,
                session=ClassSession.from_model(result.session),
                message="Clase actualizada",
                credit_results=[CreditResult.from_data(r) for r in result.credit_results],
            )
        except StudioError as e:
            return ClassSessionResponse(success=False, session=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def update_session_status(self, info: Info, session_id: str, new_status: str) -> ClassSessionResponse:
        """Update session status"""
        store = info.context.store

        try:
            result = update_session_status(store, session_id, new_status)
            return ClassSessionResponse(
                success=True,
                session=ClassSession.from_model(result.session),
                message="Estado actualizado",
                credit_results=[CreditResult.from_data(r) for r in result.credit_results],
            )
        except StudioError as e:
            return ClassSessionResponse(success=False, session=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def delete_class_session(self, info: Info, session_id: str) -> ClassSessionResponse:
        """Remove a session (debited credits are not refunded)"""
        store = info.context.store

        try:
            session = delete_class_session(store, session_id)
            return ClassSessionResponse(
                success=True,
                session=ClassSession.from_model(session),
                message="Clase eliminada"
            )
        except StudioError as e:
            return ClassSessionResponse(success=False, session=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def enroll(self, info: Info, input: EnrollInput) -> EnrollmentResponse:
        """Book a student into a session"""
        store = info.context.store

        try:
            attendee = enroll(store, input.session_id, input.student_id, input.attendance_type)
            return EnrollmentResponse(
                success=True,
                attendee=Attendee.from_model(attendee),
                message="Alumna inscripta"
            )
        except StudioError as e:
            logger.info("Enrollment of %s in %s rejected: %s", input.student_id, input.session_id, e.code)
            return EnrollmentResponse(success=False, attendee=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def unenroll(self, info: Info, session_id: str, student_id: str) -> EnrollmentResponse:
        """Remove a student from a session, refunding a debited credit"""
        store = info.context.store

        try:
            outcome = unenroll(store, session_id, student_id)
            return EnrollmentResponse(
                success=True,
                attendee=None,
                message="Alumna quitada de la clase",
                refund=outcome.value
            )
        except StudioError as e:
            return EnrollmentResponse(success=False, attendee=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def cancel_attendance(self, info: Info, session_id: str, student_id: str) -> EnrollmentResponse:
        store = info.context.store

        try:
            attendee = cancel_attendance(store, session_id, student_id)
            return EnrollmentResponse(
                success=True,
                attendee=Attendee.from_model(attendee),
                message="Reserva cancelada"
            )
        except StudioError as e:
            return EnrollmentResponse(success=False, attendee=None, message=str(e), error_code=e.code)
