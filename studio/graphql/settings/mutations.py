"""
GraphQL mutations for room rate settings
"""
import logging

import strawberry
from strawberry.types import Info

from studio.core.catalog import get_room
from studio.core.errors import StudioError
from studio.crud.ratesCrud import reset_room_rate, update_room_rate
from .types import Room, RoomResponse, UpdateRoomRateInput

logger = logging.getLogger(__name__)


@strawberry.type
class SettingsMutations:
    @strawberry.mutation
    async def update_room_rate(self, info: Info, input: UpdateRoomRateInput) -> RoomResponse:
        """Save tier and private rates for a room"""
        store = info.context.store

        try:
            room_rate = update_room_rate(
                store,
                input.room_id,
                private_rate=input.private_rate,
                rates=[tier.to_model() for tier in input.rates],
            )
            return RoomResponse(
                success=True,
                room=Room.from_catalog(get_room(input.room_id), room_rate, False),
                message=f"Configuración para {get_room(input.room_id)['name']} guardada",
            )
        except StudioError as e:
            logger.info("Rate update rejected for %s: %s", input.room_id, e)
            return RoomResponse(success=False, room=None, message=str(e), error_code=e.code)

    @strawberry.mutation
    async def reset_room_rate(self, info: Info, room_id: str) -> RoomResponse:
        """Go back to the catalog rates for a room"""
        store = info.context.store

        try:
            room_rate = reset_room_rate(store, room_id)
            return RoomResponse(
                success=True,
                room=Room.from_catalog(get_room(room_id), room_rate, True),
                message="Valores restaurados a los predeterminados",
            )
        except StudioError as e:
            return RoomResponse(success=False, room=None, message=str(e), error_code=e.code)
