"""
Rate table: per-room payroll tiers and the private-session flat rate.

Settings stored in the document override the catalog defaults room by room.
"""
import logging
from typing import List, Optional, Sequence

from studio.core.catalog import ROOMS, get_room
from studio.core.errors import NotFound, ValidationError
from studio.db.store import StudioStore
from studio.models.settingsModel import RateTier, RoomRate

logger = logging.getLogger(__name__)


def default_room_rate(room_id: str) -> RoomRate:
    """Catalog rates for a room"""
    room = get_room(room_id)
    if room is None:
        raise NotFound(f"Room {room_id} not found")
    return RoomRate.model_validate({
        "private_rate": room["private_rate"],
        "rates": [dict(tier) for tier in room["rates"]],
    })


def get_room_rates(store: StudioStore, room_id: str) -> RoomRate:
    """Effective rates for a room: stored override, else catalog default"""
    override = store.data.settings.rooms.get(room_id)
    if override is not None:
        return override
    return default_room_rate(room_id)


def get_all_room_rates(store: StudioStore) -> dict:
    return {room["id"]: get_room_rates(store, room["id"]) for room in ROOMS}


def find_tier(tiers: Sequence[RateTier], count: int) -> Optional[RateTier]:
    """First tier covering the attendee count, or None"""
    return next((tier for tier in tiers if tier.covers(count)), None)


def validate_tiers(tiers: Sequence[RateTier]) -> List[RateTier]:
    """Return the tiers ordered by min, rejecting overlaps and open-ended tiers in the middle"""
    ordered = sorted(tiers, key=lambda tier: tier.min)
    for index, tier in enumerate(ordered):
        if tier.min < 0:
            raise ValidationError("Tier minimum must be zero or greater")
        if tier.max is not None and tier.max < tier.min:
            raise ValidationError(f"Tier {tier.min}-{tier.max}: maximum is lower than minimum")
        if tier.price < 0:
            raise ValidationError("Tier price must be zero or greater")
        if index + 1 < len(ordered):
            following = ordered[index + 1]
            if tier.max is None:
                raise ValidationError("Only the last tier may be unbounded")
            if following.min <= tier.max:
                raise ValidationError(
                    f"Tiers {tier.min}-{tier.max} and {following.min}-{following.max or '∞'} overlap"
                )
    return ordered


def update_room_rate(
    store: StudioStore,
    room_id: str,
    *,
    private_rate: float,
    rates: Sequence[RateTier],
) -> RoomRate:
    """Store a validated rate override for the room"""
    if get_room(room_id) is None:
        raise NotFound(f"Room {room_id} not found")
    if private_rate < 0:
        raise ValidationError("Private rate must be zero or greater")

    room_rate = RoomRate(private_rate=private_rate, rates=validate_tiers(rates))
    with store.transaction() as data:
        data.settings.rooms[room_id] = room_rate

    logger.info("Updated rates for room %s: %s tiers, private %s", room_id, len(room_rate.rates), private_rate)
    return room_rate


def reset_room_rate(store: StudioStore, room_id: str) -> RoomRate:
    """Drop the stored override so the catalog default applies again"""
    default = default_room_rate(room_id)
    with store.transaction() as data:
        data.settings.rooms.pop(room_id, None)

    logger.info("Reset rates for room %s to defaults", room_id)
    return default
