"""
Document store for the studio state.

The whole state is one JSON document kept under a namespaced key. It is loaded
wholesale, mutated in memory inside a transaction and written back wholesale;
listeners are notified after every successful write.
"""
import json
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.engine import Engine

from studio.core import config
from studio.db.database import Base, build_engine, build_sessionmaker
from studio.models.storageModel import KeyValueEntry, StudioData

logger = logging.getLogger(__name__)

ChangeListener = Callable[[StudioData], None]


class KeyValueBackend(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryBackend:
    """Process-local backend, used by tests and the in-memory deployment"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class SqlAlchemyBackend:
    """Stores each key as a row of the kv_entries table"""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = build_sessionmaker(engine)
        Base.metadata.create_all(engine, tables=[KeyValueEntry.__table__])

    def get(self, key: str) -> Optional[str]:
        with self.SessionLocal() as session:
            result = session.execute(select(KeyValueEntry).where(KeyValueEntry.key == key))
            entry = result.scalar_one_or_none()
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        with self.SessionLocal() as session:
            try:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    session.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
                session.commit()
            except Exception:
                session.rollback()
                raise


def seed_data() -> StudioData:
    """Deterministic starter dataset: a few people and no sessions"""
    return StudioData.model_validate({
        "students": [
            {
                "id": "1", "name": "Ana Torres", "phone": "555-0101", "email": "ana@example.com",
                "status": "active", "planType": "Pack 8 Clases",
                "plans": [{"id": "p-1", "discipline": "Pole Dance", "credits": 8, "active": True, "name": "Pack 8 Clases"}],
            },
            {
                "id": "2", "name": "Lucía Gómez", "phone": "555-0102", "email": "lucia@example.com",
                "status": "active", "planType": "Pack 4 Clases",
                "plans": [{"id": "p-2", "discipline": "Yoga", "credits": 4, "active": True, "name": "Pack 4 Clases"}],
            },
            {
                "id": "3", "name": "Sofía Martínez", "phone": "555-0103", "email": "sofia@example.com",
                "status": "guest",
            },
        ],
        "instructors": [
            {"id": "i-1", "name": "Carla Ruiz", "email": "carla@example.com", "specialties": ["Pole Dance", "Telas"], "ratePerClass": 0},
            {"id": "i-2", "name": "Marta Díaz", "email": "marta@example.com", "specialties": ["Yoga", "Glúteos"], "ratePerClass": 0},
        ],
        "classes": [],
        "instructorPayments": [],
        "settings": {"rooms": {}},
    })


class StudioStore:
    """Owner of the in-memory studio document"""

    def __init__(
        self,
        backend: KeyValueBackend,
        key: str = config.STORAGE_KEY,
        seed_on_empty: bool = True,
    ):
        self.backend = backend
        self.key = key
        self.seed_on_empty = seed_on_empty
        self._data: Optional[StudioData] = None
        self._listeners: List[ChangeListener] = []
        self._lock = threading.RLock()

    @property
    def data(self) -> StudioData:
        if self._data is None:
            self._data = self.load()
        return self._data

    def load(self) -> StudioData:
        """Read the document from the backend, seeding it when absent"""
        raw = self.backend.get(self.key)
        if raw is None:
            data = seed_data() if self.seed_on_empty else StudioData()
            logger.info("No document under key %s, initialized %s dataset",
                        self.key, "seed" if self.seed_on_empty else "empty")
            self._write(data)
            return data
        return StudioData.model_validate(json.loads(raw))

    def reload(self) -> StudioData:
        with self._lock:
            self._data = self.load()
            return self._data

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def transaction(self) -> Iterator[StudioData]:
        """
        Read-modify-write block.

        Yields the live document; on success the document is written and
        listeners fire, on error the in-memory state is restored.
        """
        with self._lock:
            snapshot = self.data.model_copy(deep=True)
            try:
                yield self.data
                self._write(self.data)
            except Exception:
                self._data = snapshot
                raise
            self._notify()

    def _write(self, data: StudioData) -> None:
        self.backend.set(self.key, json.dumps(data.to_document(), ensure_ascii=False))

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.data)
            except Exception:
                logger.exception("Store change listener %r failed", listener)


def build_store(backend_name: str = config.STORE_BACKEND) -> StudioStore:
    """Create the store configured for this process"""
    if backend_name == "memory":
        backend: KeyValueBackend = MemoryBackend()
    else:
        backend = SqlAlchemyBackend(build_engine())
    logger.info("Studio store using %s backend (key=%s)", backend_name, config.STORAGE_KEY)
    return StudioStore(backend, key=config.STORAGE_KEY, seed_on_empty=config.SEED_ON_EMPTY)
