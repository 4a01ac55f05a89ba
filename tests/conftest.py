from datetime import date

import pytest

from studio.crud.classSessionCrud import create_class_session
from studio.db.store import MemoryBackend, StudioStore

SESSION_DAY = date(2024, 1, 10)


@pytest.fixture
def store():
    """Fresh seeded store: students 1 (Pole Dance x8), 2 (Yoga x4), 3 (guest); instructors i-1, i-2"""
    return StudioStore(MemoryBackend())


@pytest.fixture
def empty_store():
    return StudioStore(MemoryBackend(), seed_on_empty=False)


@pytest.fixture
def make_session(store):
    def _make(
        instructor_id="i-2",
        type="Yoga",
        room_id="sala-yoga",
        session_date=SESSION_DAY,
        start_time="09:00",
        max_capacity=5,
        **kwargs,
    ):
        return create_class_session(
            store,
            instructor_id=instructor_id,
            session_date=session_date,
            start_time=start_time,
            type=type,
            room_id=room_id,
            max_capacity=max_capacity,
            **kwargs,
        )

    return _make
