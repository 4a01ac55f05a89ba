"""
GraphQL types for dashboard and monthly statistics
"""
from datetime import date
from typing import Any, Dict, List

import strawberry

from studio.graphql.class_sessions.types import ClassSession


@strawberry.type
class NamedCount:
    name: str
    count: int


def _named_counts(pairs) -> List[NamedCount]:
    return [NamedCount(name=name, count=count) for name, count in pairs]


@strawberry.type
class DashboardMetrics:
    today_count: int
    pending_count: int
    completed_count: int
    today_attendees: int
    upcoming: List[ClassSession]

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "DashboardMetrics":
        return DashboardMetrics(
            today_count=data["today_count"],
            pending_count=data["pending_count"],
            completed_count=data["completed_count"],
            today_attendees=data["today_attendees"],
            upcoming=[ClassSession.from_model(s) for s in data["upcoming"]],
        )


@strawberry.type
class MonthlyStats:
    period_start: date
    period_end: date
    total_sessions: int
    total_attendances: int
    occupancy_percentage: int
    sessions_per_instructor: List[NamedCount]
    attendees_per_discipline: List[NamedCount]
    top_students: List[NamedCount]

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "MonthlyStats":
        return MonthlyStats(
            period_start=data["period_start"],
            period_end=data["period_end"],
            total_sessions=data["total_sessions"],
            total_attendances=data["total_attendances"],
            occupancy_percentage=data["occupancy_percentage"],
            sessions_per_instructor=_named_counts(data["sessions_per_instructor"]),
            attendees_per_discipline=_named_counts(data["attendees_per_discipline"]),
            top_students=_named_counts(data["top_students"]),
        )
