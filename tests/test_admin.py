from tests.conftest import PASSWORD, auth_headers


def test_admin_creates_user_with_hashed_password(client, db, admin):
    response = client.post(
        "/users/",
        json={
            "username": "newfaculty",
            "full_name": "New Faculty",
            "email": "new@example.edu",
            "role": "faculty",
            "password": PASSWORD,
        },
        headers=auth_headers(admin),
    )

    assert response.status_code == 201
    assert "password" not in response.json()

    login = client.post("/token", data={"username": "newfaculty", "password": PASSWORD})
    assert login.status_code == 200
    assert login.json()["role"] == "faculty"


def test_duplicate_username_is_rejected(client, admin, faculty):
    response = client.post(
        "/users/",
        json={
            "username": "faculty",
            "full_name": "Dup",
            "role": "faculty",
            "password": PASSWORD,
        },
        headers=auth_headers(admin),
    )

    assert response.status_code == 400


def test_faculty_cannot_manage_users(client, faculty):
    assert client.get("/users/", headers=auth_headers(faculty)).status_code == 403


def test_courses_are_listed_by_code(client, admin, courses):
    response = client.get("/courses/", headers=auth_headers(admin))

    assert [course["code"] for course in response.json()] == ["CS101", "IS301", "MA201"]


def test_duplicate_course_code_is_rejected(client, admin, courses):
    response = client.post(
        "/courses/",
        json={"code": "CS101", "title": "Another"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Course with code CS101 already exists"


def test_assignment_makes_course_schedulable(client, admin, faculty, courses):
    response = client.post(
        "/teaching-assignments/",
        json={"user_id": faculty.id, "course_id": courses[2].id},
        headers=auth_headers(admin),
    )
    assert response.status_code == 201
    assert response.json()["course"]["code"] == "MA201"

    form = client.get("/faculty/classes/create", headers=auth_headers(faculty)).json()
    assert [course["code"] for course in form["courses"]] == ["MA201"]


def test_assignment_requires_faculty_role(client, admin, student, courses):
    response = client.post(
        "/teaching-assignments/",
        json={"user_id": student.id, "course_id": courses[0].id},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400


def test_assignment_requires_existing_course(client, admin, faculty):
    response = client.post(
        "/teaching-assignments/",
        json={"user_id": faculty.id, "course_id": 999},
        headers=auth_headers(admin),
    )

    assert response.status_code == 404


def test_duplicate_assignment_is_rejected(client, admin, faculty, assigned_courses):
    response = client.post(
        "/teaching-assignments/",
        json={"user_id": faculty.id, "course_id": assigned_courses[0].id},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400


def test_deleting_assignment_revokes_course(client, admin, faculty, courses):
    created = client.post(
        "/teaching-assignments/",
        json={"user_id": faculty.id, "course_id": courses[0].id},
        headers=auth_headers(admin),
    ).json()

    response = client.delete(
        f"/teaching-assignments/{created['id']}", headers=auth_headers(admin)
    )
    assert response.status_code == 200

    form = client.get("/faculty/classes/create", headers=auth_headers(faculty)).json()
    assert form["can_submit"] is False
    assert client.get("/teaching-assignments/", headers=auth_headers(admin)).json() == []


def test_unknown_role_is_rejected(client, admin):
    response = client.post(
        "/users/",
        json={
            "username": "ghost",
            "full_name": "Ghost",
            "role": "superuser",
            "password": PASSWORD,
        },
        headers=auth_headers(admin),
    )

    assert response.status_code == 422
