"""
Rate settings: per-room payroll tiers and private-session flat rate
"""
from typing import Dict, List, Optional

from pydantic import Field

from studio.models.baseModel import DocumentModel


class RateTier(DocumentModel):
    """Pay for a session whose booked attendee count falls in [min, max]"""

    min: int = 0
    max: Optional[int] = None  # None means unbounded
    price: float = 0

    def covers(self, count: int) -> bool:
        return count >= self.min and (self.max is None or count <= self.max)


class RoomRate(DocumentModel):
    private_rate: float = 0
    rates: List[RateTier] = Field(default_factory=list)


class StudioSettings(DocumentModel):
    rooms: Dict[str, RoomRate] = Field(default_factory=dict)
