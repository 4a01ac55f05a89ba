"""
Reporting service for the studio dashboard and the monthly statistics page
"""
import calendar
import logging
from collections import Counter
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from studio.db.store import StudioStore
from studio.models.classModel import PENDING_STATUSES, ClassSession

logger = logging.getLogger(__name__)


class StatsService:
    """Read-only aggregations over the studio document"""

    def __init__(self, store: StudioStore):
        self.store = store

    def _active_sessions(self) -> List[ClassSession]:
        return [s for s in self.store.data.classes if not s.is_cancelled]

    def dashboard_metrics(self, now: Optional[datetime] = None, upcoming_limit: int = 5) -> Dict[str, Any]:
        """
        Figures for the home dashboard

        Args:
            now: Reference moment (defaults to the current local time)
            upcoming_limit: How many upcoming sessions to return

        Returns:
            today_count, pending_count, completed_count, today_attendees and
            the next pending sessions from today onwards
        """
        now = now or datetime.now()
        today = now.date()
        classes = self.store.data.classes

        today_sessions = [s for s in self._active_sessions() if s.date == today]
        upcoming = sorted(
            (
                s for s in classes
                if s.status in PENDING_STATUSES
                and s.date >= today
            ),
            key=lambda s: (s.date, s.start_time),
        )

        return {
            "today_count": len(today_sessions),
            "pending_count": sum(1 for s in classes if s.status in PENDING_STATUSES),
            "completed_count": sum(1 for s in classes if s.status == "completed"),
            "today_attendees": sum(s.booked_count for s in today_sessions),
            "upcoming": upcoming[:upcoming_limit],
        }

    def monthly_stats(self, year: int, month: int) -> Dict[str, Any]:
        """Instructor load, occupancy, discipline popularity and top students for one month"""
        first = date(year, month, 1)
        last = date(year, month, calendar.monthrange(year, month)[1])
        sessions = [s for s in self._active_sessions() if first <= s.date <= last]

        per_instructor = Counter(s.instructor_name or s.instructor_id for s in sessions)
        per_discipline: Counter = Counter()
        per_student: Counter = Counter()
        total_capacity = 0
        total_attendees = 0
        for session in sessions:
            booked = session.booked_attendees
            total_capacity += session.max_capacity
            total_attendees += len(booked)
            per_discipline[session.type] += len(booked)
            for attendee in booked:
                per_student[attendee.student_name] += 1

        occupancy = round(total_attendees / total_capacity * 100) if total_capacity else 0
        logger.debug("Monthly stats %s-%02d: %s sessions, occupancy %s%%", year, month, len(sessions), occupancy)

        return {
            "period_start": first,
            "period_end": last,
            "total_sessions": len(sessions),
            "total_attendances": total_attendees,
            "occupancy_percentage": occupancy,
            "sessions_per_instructor": per_instructor.most_common(),
            "attendees_per_discipline": per_discipline.most_common(),
            "top_students": per_student.most_common(10),
        }
