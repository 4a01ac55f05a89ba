from typing import Optional

import strawberry
from strawberry.types import Info

from studio.services.stats_service import StatsService
from .types import DashboardMetrics, MonthlyStats


@strawberry.type
class StatsQueries:
    @strawberry.field
    async def dashboard(self, info: Info, upcoming_limit: int = 5) -> DashboardMetrics:
        service = StatsService(info.context.store)
        return DashboardMetrics.from_dict(service.dashboard_metrics(upcoming_limit=upcoming_limit))

    @strawberry.field
    async def monthly_stats(self, info: Info, year: int, month: int) -> Optional[MonthlyStats]:
        """Null when the month is out of range"""
        if not 1 <= month <= 12:
            return None
        service = StatsService(info.context.store)
        return MonthlyStats.from_dict(service.monthly_stats(year, month))
