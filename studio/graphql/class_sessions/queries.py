"""
GraphQL queries for Class Sessions
"""
from datetime import date
from typing import Optional

import strawberry
from strawberry.types import Info

from studio.core.errors import StudioError
from studio.crud.availabilityCrud import is_available
from studio.crud.classSessionCrud import get_sessions_by_date_range
from .types import ClassSession, ClassSessionsResponse, GetClassSessionsInput


@strawberry.type
class ClassSessionQueries:
    """Class Session queries"""

    @strawberry.field
    async def class_session(self, info: Info, session_id: str) -> Optional[ClassSession]:
        """Get a single class session by ID"""
        session = info.context.store.data.find_class(session_id)
        if session:
            return ClassSession.from_model(session)
        return None

    @strawberry.field
    async def class_sessions(
        self,
        info: Info,
        filters: Optional[GetClassSessionsInput] = None
    ) -> ClassSessionsResponse:
        """Get class sessions with optional filters"""
        if not filters:
            filters = GetClassSessionsInput()

        sessions = get_sessions_by_date_range(
            info.context.store,
            filters.start_date,
            filters.end_date,
            instructor_id=filters.instructor_id,
            room_id=filters.room_id,
            status=filters.status,
            student_id=filters.student_id,
        )
        session_list = [ClassSession.from_model(session) for session in sessions]
        return ClassSessionsResponse(sessions=session_list, total_count=len(session_list))

    @strawberry.field
    async def check_availability(
        self,
        info: Info,
        person_id: str,
        date: date,
        start_time: str,
        role: str,
        exclude_session_id: Optional[str] = None,
    ) -> Optional[bool]:
        """Whether the instructor/attendee is free at that date and time; null for an invalid role or slot"""
        try:
            return is_available(info.context.store, person_id, date, start_time, role, exclude_session_id)
        except StudioError:
            return None
