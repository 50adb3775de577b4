from __future__ import annotations

import pytest

from school_attendance.attendance.sql_attendance_repository import SQLAttendanceRepository
from school_attendance.core.enums import AttendanceStatus


@pytest.fixture()
def school(client, admin_headers, bearer):
    """Admin sets up Math101 with one student; teacher T opens a session on 2024-01-05."""
    teacher = bearer("T", "t@school.io", role="teacher")

    client.post("/classes", json={"name": "Math101"}, headers=admin_headers)
    client.post("/subjects", json={"name": "Algebra"}, headers=admin_headers)
    client.post(
        "/students",
        json={"name": "Lan", "email": "lan@school.io", "className": "Math101"},
        headers=admin_headers,
    )
    res = client.post(
        "/sessions",
        json={"date": "2024-01-05", "className": "Math101", "subjectName": "Algebra"},
        headers=teacher,
    )
    assert res.status_code == 201, res.get_json()
    return {"admin": admin_headers, "teacher": teacher, "session": res.get_json()["data"]}


def _mark(client, headers, status="absent", **overrides):
    body = {
        "className": "Math101",
        "date": "2024-01-05",
        "studentName": "Lan",
        "studentEmail": "lan@school.io",
        "status": status,
    }
    body.update(overrides)
    return client.post("/attendance", json=body, headers=headers)


def test_session_created_by_teacher_is_assigned_to_them(school):
    session = school["session"]
    assert session["teacher"]["name"] == "T"
    assert session["teacher"]["role"] == "teacher"
    assert session["date"] == "2024-01-05"


def test_session_rejects_unpadded_date(client, school):
    res = client.post(
        "/sessions",
        json={"date": "2024-1-5", "className": "Math101", "subjectName": "Algebra"},
        headers=school["teacher"],
    )
    assert res.status_code == 400
    assert res.get_json() == {"message": "date is required in YYYY-MM-DD format"}


def test_teacher_records_attendance_with_nested_relations(client, school):
    res = _mark(client, school["teacher"])

    assert res.status_code == 201
    data = res.get_json()["data"]
    assert data["status"] == "absent"
    assert data["session"]["classEntity"]["name"] == "Math101"
    assert data["session"]["subject"]["name"] == "Algebra"
    assert data["session"]["teacher"]["email"] == "t@school.io"
    assert data["student"]["email"] == "lan@school.io"


def test_second_record_for_same_pair_is_conflict(client, school):
    assert _mark(client, school["teacher"]).status_code == 201

    res = _mark(client, school["teacher"], status="present")
    assert res.status_code == 409
    assert res.get_json() == {"message": "Attendance already recorded for this student and session"}


def test_admin_cannot_record_attendance(client, school):
    assert _mark(client, school["admin"]).status_code == 403


def test_attendance_resolution_errors(client, school):
    res = _mark(client, school["teacher"], date="2024-01-06")
    assert res.status_code == 404
    assert res.get_json()["message"] == "Session not found for the given class and date"

    res = _mark(client, school["teacher"], studentName="Other")
    assert res.status_code == 404

    res = _mark(client, school["teacher"], status="sleeping")
    assert res.status_code == 400


def test_update_and_list_attendance(client, school):
    created = _mark(client, school["teacher"]).get_json()["data"]

    res = client.put(f"/attendance/{created['id']}", json={"status": "late"}, headers=school["teacher"])
    assert res.status_code == 200
    assert res.get_json()["data"]["status"] == "late"

    res = client.put("/attendance/999", json={"status": "late"}, headers=school["teacher"])
    assert res.status_code == 404
    assert res.get_json()["message"] == "Attendance record not found"

    session_id = school["session"]["id"]
    student_id = created["student"]["id"]
    class_id = school["session"]["classEntity"]["id"]
    for path in (f"/attendance/session/{session_id}", f"/attendance/student/{student_id}", f"/attendance/class/{class_id}"):
        listed = client.get(path, headers=school["admin"]).get_json()["data"]
        assert [r["id"] for r in listed] == [created["id"]]

    assert client.get("/attendance/session/9999", headers=school["admin"]).get_json()["data"] == []
    res = client.get("/attendance/session/0", headers=school["admin"])
    assert res.status_code == 400
    assert res.get_json()["message"] == "Invalid session id"


def test_stats_json_and_csv(client, school):
    _mark(client, school["teacher"], status="absent")
    class_id = school["session"]["classEntity"]["id"]

    res = client.get(f"/stats/class/{class_id}", headers=school["admin"])
    assert res.status_code == 200
    assert res.get_json() == {"id": class_id, "classId": class_id, "absences": 1, "late": 0}

    res = client.get(f"/stats/class/{class_id}?format=CSV", headers=school["admin"])
    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert res.get_data(as_text=True) == "metric,count\nabsent,1\nlate,0\n"


def test_student_stats_requires_admin(client, school):
    _mark(client, school["teacher"], status="late")
    student_id = client.get("/students").get_json()["data"][0]["id"]

    assert client.get(f"/stats/student/{student_id}", headers=school["teacher"]).status_code == 403

    body = client.get(f"/stats/student/{student_id}", headers=school["admin"]).get_json()
    assert body == {"id": student_id, "studentId": student_id, "absences": 0, "late": 1}

    res = client.get("/stats/student/abc", headers=school["admin"])
    assert res.status_code == 400
    assert res.get_json()["message"] == "Invalid student id"


def test_deleting_class_cascades_to_attendance(client, school):
    _mark(client, school["teacher"])
    class_id = school["session"]["classEntity"]["id"]

    assert client.delete(f"/classes/{class_id}", headers=school["admin"]).status_code == 200
    assert client.get(f"/attendance/class/{class_id}", headers=school["admin"]).get_json()["data"] == []
    assert client.get("/sessions").get_json()["data"] == []


def test_teacher_update_with_teacher_name_assigns_that_teacher(client, school, bearer):
    bearer("Mr Hoang", "hoang@school.io", role="teacher")
    session_id = school["session"]["id"]

    res = client.put(
        f"/sessions/{session_id}",
        json={"date": "2024-01-05", "className": "Math101", "subjectName": "Algebra", "teacherName": "Mr Hoang"},
        headers=school["teacher"],
    )
    assert res.status_code == 200
    assert res.get_json()["data"]["teacher"]["email"] == "hoang@school.io"


def test_admin_update_without_teacher_name_clears_teacher(client, school):
    client.post("/classes", json={"name": "Art"}, headers=school["admin"])
    session_id = school["session"]["id"]

    res = client.put(
        f"/sessions/{session_id}",
        json={"date": "2024-03-01", "className": "Art", "subjectName": "Algebra"},
        headers=school["admin"],
    )
    data = res.get_json()["data"]
    assert res.status_code == 200
    assert data["classEntity"]["name"] == "Art"
    assert data["date"] == "2024-03-01"
    assert data["teacher"] is None


def test_session_update_and_delete_errors(client, school):
    body = {"date": "2024-01-05", "className": "Math101", "subjectName": "Algebra"}

    res = client.put("/sessions/999", json=body, headers=school["teacher"])
    assert res.status_code == 404
    assert res.get_json() == {"message": "Session not found"}

    res = client.put("/sessions/abc", json=body, headers=school["teacher"])
    assert res.status_code == 400

    bearer_less = client.delete(f"/sessions/{school['session']['id']}")
    assert bearer_less.status_code == 401


def test_session_delete(client, school):
    session_id = school["session"]["id"]

    res = client.delete(f"/sessions/{session_id}", headers=school["teacher"])
    assert res.status_code == 200
    assert res.get_json() == {"message": "Session deleted"}
    assert client.get(f"/sessions/{session_id}").status_code == 404
    assert client.delete(f"/sessions/{session_id}", headers=school["teacher"]).status_code == 404


def test_database_refuses_second_row_for_same_pair(app, client, school):
    created = _mark(client, school["teacher"]).get_json()["data"]

    with app.app_context():
        repo = SQLAttendanceRepository()
        duplicate = repo.create(
            session_id=created["session"]["id"],
            student_id=created["student"]["id"],
            status=AttendanceStatus.LATE,
        )
        assert duplicate is None
        assert [r.status for r in repo.list_by_session(created["session"]["id"])] == [AttendanceStatus.ABSENT]


def test_deleting_student_removes_their_attendance(client, school):
    created = _mark(client, school["teacher"]).get_json()["data"]
    student_id = created["student"]["id"]

    res = client.delete(f"/students/{student_id}", headers=school["admin"])
    assert res.status_code == 200
    assert res.get_json() == {"message": "Student deleted"}

    session_id = school["session"]["id"]
    assert client.get(f"/attendance/session/{session_id}", headers=school["admin"]).get_json()["data"] == []
    assert client.get(f"/attendance/student/{student_id}", headers=school["admin"]).get_json()["data"] == []
