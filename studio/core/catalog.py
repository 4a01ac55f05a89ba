"""
Static studio catalog: rooms, disciplines, default rates and plan presets.

Read-only configuration; per-room rate overrides live in the settings
sub-document of the store.
"""
from typing import Dict, List, Optional, Tuple

DISCIPLINES = ["Pole Dance", "Yoga", "Telas", "Glúteos"]

# Plans bought for "General" may be spent on any discipline
GENERAL_DISCIPLINE = "General"

# Labels that name the same discipline even though neither contains the other
LEGACY_DISCIPLINE_PAIRS: List[Tuple[str, str]] = [
    ("Pole Exotic", "Pole Dance"),
]

UNLIMITED_PLAN_NAME = "Ilimitado"
UNLIMITED_CREDITS_THRESHOLD = 900

# Plan name -> credits granted on purchase
PLAN_PRESETS: Dict[str, int] = {
    "Clase Suelta": 1,
    "Pack 4 Clases": 4,
    "Pack 8 Clases": 8,
    "Pack 12 Clases": 12,
    "Pack 24 Clases": 24,
    UNLIMITED_PLAN_NAME: 999,
}

PAYMENT_METHODS = ["Efectivo", "Transferencia", "Tarjeta"]

SESSION_DURATION_HOURS = 1

ROOMS = [
    {
        "id": "sala-pole",
        "name": "Sala Pole",
        "discipline": "Pole Dance",
        "private_rate": 25,
        "rates": [
            {"min": 1, "max": 2, "price": 10},
            {"min": 3, "max": 4, "price": 15},
            {"min": 5, "max": None, "price": 20},
        ],
    },
    {
        "id": "sala-yoga",
        "name": "Sala Yoga",
        "discipline": "Yoga",
        "private_rate": 20,
        "rates": [
            {"min": 1, "max": 3, "price": 10},
            {"min": 4, "max": 8, "price": 15},
            {"min": 9, "max": None, "price": 18},
        ],
    },
    {
        "id": "sala-telas",
        "name": "Sala Telas",
        "discipline": "Telas",
        "private_rate": 25,
        "rates": [
            {"min": 1, "max": 2, "price": 12},
            {"min": 3, "max": None, "price": 18},
        ],
    },
    {
        "id": "sala-gluteos",
        "name": "Sala Glúteos",
        "discipline": "Glúteos",
        "private_rate": 18,
        "rates": [
            {"min": 1, "max": 5, "price": 10},
            {"min": 6, "max": None, "price": 15},
        ],
    },
]


def get_room(room_id: str) -> Optional[dict]:
    return next((room for room in ROOMS if room["id"] == room_id), None)
