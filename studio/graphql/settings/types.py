"""
GraphQL types for room rate settings
"""
from typing import List, Optional

import strawberry

from studio.models.settingsModel import RateTier as RateTierModel, RoomRate as RoomRateModel


@strawberry.type
class RateTier:
    min: int
    max: Optional[int]
    price: float

    @classmethod
    def from_model(cls, tier: RateTierModel) -> "RateTier":
        return cls(min=tier.min, max=tier.max, price=tier.price)


@strawberry.type
class Room:
    id: str
    name: str
    discipline: str
    private_rate: float
    rates: List[RateTier]
    is_default: bool

    @classmethod
    def from_catalog(cls, room: dict, room_rate: RoomRateModel, is_default: bool) -> "Room":
        return cls(
            id=room["id"],
            name=room["name"],
            discipline=room["discipline"],
            private_rate=room_rate.private_rate,
            rates=[RateTier.from_model(tier) for tier in room_rate.rates],
            is_default=is_default,
        )


@strawberry.input
class RateTierInput:
    min: int
    price: float
    max: Optional[int] = None

    def to_model(self) -> RateTierModel:
        return RateTierModel(min=self.min, max=self.max, price=self.price)


@strawberry.input
class UpdateRoomRateInput:
    room_id: str
    private_rate: float
    rates: List[RateTierInput]


@strawberry.type
class RoomResponse:
    success: bool
    room: Optional[Room]
    message: str
    error_code: Optional[str] = None


@strawberry.type
class PlanPreset:
    name: str
    credits: int
