from typing import List, Optional

import strawberry
from strawberry.types import Info

from studio.core.catalog import DISCIPLINES, PLAN_PRESETS, ROOMS, get_room
from studio.crud.ratesCrud import get_room_rates
from .types import PlanPreset, Room


@strawberry.type
class SettingsQueries:
    @strawberry.field
    async def rooms(self, info: Info) -> List[Room]:
        """Every catalog room with its effective rates"""
        store = info.context.store
        overrides = store.data.settings.rooms
        return [
            Room.from_catalog(room, get_room_rates(store, room["id"]), room["id"] not in overrides)
            for room in ROOMS
        ]

    @strawberry.field
    async def room(self, info: Info, room_id: str) -> Optional[Room]:
        store = info.context.store
        room = get_room(room_id)
        if room is None:
            return None
        return Room.from_catalog(room, get_room_rates(store, room_id), room_id not in store.data.settings.rooms)

    @strawberry.field
    async def disciplines(self) -> List[str]:
        return list(DISCIPLINES)

    @strawberry.field
    async def plan_presets(self) -> List[PlanPreset]:
        """Plan names offered at checkout with the credits they grant"""
        return [PlanPreset(name=name, credits=credits) for name, credits in PLAN_PRESETS.items()]
