from __future__ import annotations


def test_class_round_trip_with_empty_relations(client, admin_headers):
    created = client.post("/classes", json={"name": "  10B "}, headers=admin_headers)
    assert created.status_code == 201
    class_id = created.get_json()["data"]["id"]
    assert created.get_json()["data"]["name"] == "10B"

    fetched = client.get(f"/classes/{class_id}")
    assert fetched.status_code == 200
    assert fetched.get_json()["data"] == {"id": class_id, "name": "10B", "students": [], "sessions": []}


def test_class_errors(client, admin_headers):
    assert client.post("/classes", json={"name": ""}, headers=admin_headers).get_json() == {"message": "Name is required"}

    res = client.get("/classes/abc")
    assert res.status_code == 400
    assert res.get_json()["message"] == "Invalid id parameter"

    res = client.get("/classes/999")
    assert res.status_code == 404
    assert res.get_json()["message"] == "Class not found"


def test_class_update_and_delete(client, admin_headers):
    class_id = client.post("/classes", json={"name": "10B"}, headers=admin_headers).get_json()["data"]["id"]

    res = client.put(f"/classes/{class_id}", json={"name": "11B"}, headers=admin_headers)
    assert res.get_json()["data"]["name"] == "11B"

    res = client.delete(f"/classes/{class_id}", headers=admin_headers)
    assert res.get_json() == {"message": "Class deleted"}
    assert client.get(f"/classes/{class_id}").status_code == 404


def test_subject_names_are_unique(client, admin_headers):
    first = client.post("/subjects", json={"name": "Algebra"}, headers=admin_headers)
    assert first.status_code == 201

    dup = client.post("/subjects", json={"name": "Algebra"}, headers=admin_headers)
    assert dup.status_code == 400
    assert dup.get_json()["message"] == "Subject already exists"

    other_id = client.post("/subjects", json={"name": "Physics"}, headers=admin_headers).get_json()["data"]["id"]
    res = client.put(f"/subjects/{other_id}", json={"name": "Algebra"}, headers=admin_headers)
    assert res.status_code == 400
    assert res.get_json()["message"] == "Subject name already in use"

    # renaming to its own name is allowed
    res = client.put(f"/subjects/{other_id}", json={"name": "Physics"}, headers=admin_headers)
    assert res.status_code == 200


def test_student_requires_known_class(client, admin_headers):
    res = client.post(
        "/students", json={"name": "Lan", "email": "lan@school.io", "className": "Nope"}, headers=admin_headers
    )
    assert res.status_code == 400
    assert res.get_json()["message"] == "Invalid className"

    client.post("/classes", json={"name": "10B"}, headers=admin_headers)
    res = client.post(
        "/students", json={"name": "Lan", "email": "lan@school.io", "className": "10B"}, headers=admin_headers
    )
    assert res.status_code == 201
    assert res.get_json()["data"]["classEntity"]["name"] == "10B"

    dup = client.post(
        "/students", json={"name": "Lan 2", "email": "lan@school.io", "className": "10B"}, headers=admin_headers
    )
    assert dup.get_json()["message"] == "Email already in use"


def test_class_detail_lists_students(client, admin_headers):
    class_id = client.post("/classes", json={"name": "10B"}, headers=admin_headers).get_json()["data"]["id"]
    client.post("/students", json={"name": "Lan", "email": "lan@school.io", "className": "10B"}, headers=admin_headers)

    detail = client.get(f"/classes/{class_id}").get_json()["data"]
    assert [s["email"] for s in detail["students"]] == ["lan@school.io"]

    listing = client.get("/classes").get_json()["data"]
    assert listing[0]["students"][0]["name"] == "Lan"


def _add_student(client, headers, name, email, class_name="10B"):
    return client.post("/students", json={"name": name, "email": email, "className": class_name}, headers=headers)


def test_student_update_keeps_own_email_and_rejects_anothers(client, admin_headers):
    client.post("/classes", json={"name": "10B"}, headers=admin_headers)
    client.post("/classes", json={"name": "11A"}, headers=admin_headers)
    lan_id = _add_student(client, admin_headers, "Lan", "lan@school.io").get_json()["data"]["id"]
    _add_student(client, admin_headers, "Minh", "minh@school.io")

    res = client.put(
        f"/students/{lan_id}",
        json={"name": "Lan Nguyen", "email": "lan@school.io", "className": "11A"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.get_json()["data"] == {
        "id": lan_id,
        "name": "Lan Nguyen",
        "email": "lan@school.io",
        "classEntity": {"id": 2, "name": "11A"},
    }

    res = client.put(
        f"/students/{lan_id}",
        json={"name": "Lan", "email": "minh@school.io", "className": "10B"},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.get_json() == {"message": "Email already in use"}
    assert client.get(f"/students/{lan_id}").get_json()["data"]["email"] == "lan@school.io"


def test_student_update_unknown_id(client, admin_headers):
    client.post("/classes", json={"name": "10B"}, headers=admin_headers)

    res = client.put(
        "/students/404", json={"name": "Lan", "email": "lan@school.io", "className": "10B"}, headers=admin_headers
    )
    assert res.status_code == 404
    assert res.get_json() == {"message": "Student not found"}


def test_oversized_id_is_rejected_before_reaching_the_database(client, admin_headers):
    for path in ("/classes/99999999999999999999", "/students/99999999999999999999", "/sessions/99999999999999999999"):
        res = client.get(path)
        assert res.status_code == 400
        assert res.get_json() == {"message": "Invalid id parameter"}

    res = client.get("/attendance/session/99999999999999999999", headers=admin_headers)
    assert res.status_code == 400
    assert res.get_json() == {"message": "Invalid session id"}
