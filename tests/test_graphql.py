import asyncio
from types import SimpleNamespace

from fastapi.testclient import TestClient

from studio.db.store import MemoryBackend, StudioStore
from studio.graphql.schema import schema


def execute(store, query, variables=None):
    result = asyncio.run(
        schema.execute(query, variable_values=variables, context_value=SimpleNamespace(store=store))
    )
    assert result.errors is None, result.errors
    return result.data


CREATE_SESSION = """
mutation Create($input: CreateClassSessionInput!) {
  createClassSession(input: $input) {
    success
    message
    errorCode
    session { id startTime endTime bookedCount availableSpots instructorName }
  }
}
"""

ENROLL = """
mutation Enroll($sessionId: String!, $studentId: String!) {
  enroll(input: {sessionId: $sessionId, studentId: $studentId}) {
    success
    errorCode
    attendee { studentName creditDeducted }
  }
}
"""


def create_session(store, **overrides):
    values = {
        "instructorId": "i-2",
        "type": "Yoga",
        "date": "2024-01-10",
        "startTime": "09:00",
        "roomId": "sala-yoga",
        "maxCapacity": 5,
    }
    values.update(overrides)
    return execute(store, CREATE_SESSION, {"input": values})["createClassSession"]


def test_create_session_and_enroll(store):
    created = create_session(store)
    assert created["success"] is True
    assert created["session"]["endTime"] == "10:00"
    assert created["session"]["instructorName"] == "Marta Díaz"
    session_id = created["session"]["id"]

    enrolled = execute(store, ENROLL, {"sessionId": session_id, "studentId": "2"})["enroll"]
    assert enrolled == {
        "success": True,
        "errorCode": None,
        "attendee": {"studentName": "Lucía Gómez", "creditDeducted": False},
    }

    again = execute(store, ENROLL, {"sessionId": session_id, "studentId": "2"})["enroll"]
    assert (again["success"], again["errorCode"]) == (False, "ALREADY_ENROLLED")


def test_engine_errors_become_unsuccessful_responses(store):
    create_session(store)

    clash = create_session(store, roomId="sala-gluteos")
    assert clash["success"] is False
    assert clash["errorCode"] == "SCHEDULE_COLLISION"
    assert clash["session"] is None

    missing = create_session(store, instructorId=None, startTime="10:00")
    assert missing["errorCode"] == "VALIDATION_ERROR"


def test_completion_reports_credit_outcomes(store):
    session_id = create_session(store)["session"]["id"]
    execute(store, ENROLL, {"sessionId": session_id, "studentId": "2"})

    data = execute(
        store,
        """
        mutation Complete($id: String!) {
          updateSessionStatus(sessionId: $id, newStatus: "completed") {
            success
            creditResults { studentId outcome planRemoved }
          }
        }
        """,
        {"id": session_id},
    )["updateSessionStatus"]

    assert data["creditResults"] == [{"studentId": "2", "outcome": "deducted", "planRemoved": False}]

    credits = execute(
        store,
        '{ studentCredits(studentId: "2", discipline: "Yoga", onDate: "2024-01-10") }',
    )["studentCredits"]
    assert credits == 3


def test_rooms_and_rate_update(store):
    data = execute(
        store,
        """
        mutation {
          updateRoomRate(input: {roomId: "sala-pole", privateRate: 30, rates: [{min: 1, price: 12}]}) {
            success
            room { id privateRate isDefault rates { min max price } }
          }
        }
        """,
    )["updateRoomRate"]
    assert data["room"] == {
        "id": "sala-pole",
        "privateRate": 30.0,
        "isDefault": False,
        "rates": [{"min": 1, "max": None, "price": 12.0}],
    }

    rooms = execute(store, "{ rooms { id isDefault } }")["rooms"]
    assert {r["id"]: r["isDefault"] for r in rooms}["sala-yoga"] is True


def test_payroll_and_stats_queries(store):
    session_id = create_session(store)["session"]["id"]
    execute(store, ENROLL, {"sessionId": session_id, "studentId": "2"})
    execute(store, 'mutation($id: String!) { updateSessionStatus(sessionId: $id, newStatus: "confirmed") { success } }',
            {"id": session_id})

    data = execute(
        store,
        """
        {
          pendingPayroll(instructorId: "i-2", periodStart: "2024-01-01", periodEnd: "2024-01-31") {
            success
            payroll { totalCount totalPay sessions { amount attendeeCount } }
          }
          monthlyStats(year: 2024, month: 1) { totalSessions totalAttendances topStudents { name count } }
        }
        """,
    )

    assert data["pendingPayroll"]["payroll"] == {
        "totalCount": 1,
        "totalPay": 10.0,
        "sessions": [{"amount": 10.0, "attendeeCount": 1}],
    }
    assert data["monthlyStats"]["topStudents"] == [{"name": "Lucía Gómez", "count": 1}]


def test_student_payment_mutation(store):
    data = execute(
        store,
        """
        mutation {
          processPayment(input: {studentId: "3", amount: 90, method: "Transferencia",
                                 planName: "Pack 4 Clases", credits: 4, discipline: "Telas"}) {
            success
            plan { credits discipline isUnlimited }
          }
        }
        """,
    )["processPayment"]

    assert data == {"success": True, "plan": {"credits": 4, "discipline": "Telas", "isUnlimited": False}}

    rejected = execute(
        store,
        """
        mutation {
          processPayment(input: {studentId: "3", amount: 90, method: "Cheque",
                                 planName: "Pack 4 Clases", credits: 4, discipline: "Telas"}) {
            success
            errorCode
          }
        }
        """,
    )["processPayment"]
    assert rejected == {"success": False, "errorCode": "VALIDATION_ERROR"}


def test_http_endpoint(monkeypatch, tmp_path):
    import studio.main as main

    monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "studio.log"))
    monkeypatch.setattr(main, "build_store", lambda: StudioStore(MemoryBackend()))

    with TestClient(main.app) as client:
        assert client.get("/").status_code == 200
        response = client.post("/graphql", json={"query": "{ students { totalCount } }"})

    assert response.status_code == 200
    assert response.json()["data"]["students"]["totalCount"] == 3


def test_update_session_date_moves_the_session(store):
    session_id = create_session(store)["session"]["id"]

    data = execute(
        store,
        """
        mutation Move($id: String!) {
          updateClassSession(input: {sessionId: $id, date: "2024-01-11", startTime: "18:00"}) {
            success
            session { date startTime endTime }
          }
        }
        """,
        {"id": session_id},
    )["updateClassSession"]

    assert data == {
        "success": True,
        "session": {"date": "2024-01-11", "startTime": "18:00", "endTime": "19:00"},
    }


def test_history_entry_keeps_its_date(store):
    data = execute(
        store,
        """
        mutation {
          addHistoryEntry(input: {studentId: "1", activity: "Evaluación", cost: 10, date: "2024-01-05"}) {
            success
            student { history { activity date cost } }
          }
        }
        """,
    )["addHistoryEntry"]

    assert data["success"] is True
    assert {"activity": "Evaluación", "date": "2024-01-05", "cost": 10.0} in data["student"]["history"]


def test_catalog_queries(store):
    data = execute(store, "{ disciplines planPresets { name credits } }")

    assert data["disciplines"] == ["Pole Dance", "Yoga", "Telas", "Glúteos"]
    assert {"name": "Pack 12 Clases", "credits": 12} in data["planPresets"]


def test_availability_with_unknown_role_is_null(store):
    create_session(store)

    data = execute(
        store,
        """
        {
          busy: checkAvailability(personId: "i-2", date: "2024-01-10", startTime: "09:00", role: "instructor")
          unknown: checkAvailability(personId: "i-2", date: "2024-01-10", startTime: "09:00", role: "coach")
        }
        """,
    )

    assert data == {"busy": False, "unknown": None}
