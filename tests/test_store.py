import json

import pytest

from studio.core.errors import ValidationError
from studio.crud.studentsCrud import add_student
from studio.db.database import build_engine
from studio.db.store import MemoryBackend, SqlAlchemyBackend, StudioStore


def test_missing_document_is_seeded(store):
    data = store.data

    assert [s.id for s in data.students] == ["1", "2", "3"]
    assert [i.id for i in data.instructors] == ["i-1", "i-2"]
    assert data.classes == []
    assert data.instructor_payments == []


def test_seed_is_written_under_namespaced_key():
    backend = MemoryBackend()
    StudioStore(backend).load()

    document = json.loads(backend.get("atria_fitness_data_v2"))
    assert "instructorPayments" in document
    assert document["students"][0]["planType"] == "Pack 8 Clases"


def test_empty_store_without_seed(empty_store):
    assert empty_store.data.students == []


def test_listeners_fire_after_write_and_unsubscribe(store):
    seen = []
    unsubscribe = store.subscribe(lambda data: seen.append(len(data.students)))

    add_student(store, name="Nora", phone="555-0199")
    unsubscribe()
    add_student(store, name="Elena", phone="555-0198")

    assert seen == [4]


def test_failing_listener_does_not_break_write(store):
    def broken(data):
        raise RuntimeError("boom")

    store.subscribe(broken)
    student = add_student(store, name="Nora", phone="555-0199")

    assert store.reload().find_student(student.id) is not None


def test_transaction_rolls_back_on_error(store):
    writes = []
    store.subscribe(lambda data: writes.append(data))

    with pytest.raises(ValidationError):
        with store.transaction() as data:
            data.students[0].name = "Changed"
            raise ValidationError("abort")

    assert store.data.students[0].name == "Ana Torres"
    assert writes == []


def test_sqlalchemy_backend_persists_document(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'studio.db'}", echo=False)
    store = StudioStore(SqlAlchemyBackend(engine))
    student = add_student(store, name="Nora", phone="555-0199")

    reopened = StudioStore(SqlAlchemyBackend(engine))
    assert reopened.data.find_student(student.id).name == "Nora"
    assert len(reopened.data.students) == 4


def test_sqlalchemy_backend_get_missing_key(tmp_path):
    backend = SqlAlchemyBackend(build_engine(f"sqlite:///{tmp_path / 'kv.db'}", echo=False))

    assert backend.get("nothing") is None
    backend.set("k", "v1")
    backend.set("k", "v2")
    assert backend.get("k") == "v2"
