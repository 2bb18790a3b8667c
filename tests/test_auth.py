from jose import jwt

from faculty_portal.utils.authentication import (
    ALGORITHM,
    SECRET_KEY,
    create_access_token,
)
from tests.conftest import PASSWORD, auth_headers


def test_login_returns_token_with_role(client, faculty):
    response = client.post(
        "/token", data={"username": "faculty", "password": PASSWORD}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "faculty"
    assert body["user_id"] == faculty.id

    payload = jwt.decode(body["access_token"], SECRET_KEY, algorithms=[ALGORITHM])
    assert payload["sub"] == "faculty"
    assert payload["role"] == "faculty"


def test_login_rejects_wrong_password(client, faculty):
    response = client.post("/token", data={"username": "faculty", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect username or password"


def test_missing_token_is_rejected(client):
    assert client.get("/faculty/classes/create").status_code == 401


def test_garbage_token_is_rejected(client):
    response = client.get(
        "/faculty/classes/create", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"


def test_token_for_deleted_user_is_rejected(client, db, faculty):
    headers = auth_headers(faculty)
    db.delete(faculty)
    db.commit()

    assert client.get("/faculty/classes/create", headers=headers).status_code == 401


def test_non_faculty_cannot_open_form(client, student):
    response = client.get("/faculty/classes/create", headers=auth_headers(student))

    assert response.status_code == 403
    assert response.json()["detail"] == "You do not have permission to access this page."


def test_non_faculty_cannot_submit_form(client, admin):
    response = client.post(
        "/faculty/classes", json={"title": "x"}, headers=auth_headers(admin)
    )

    assert response.status_code == 403
    assert response.json()["detail"] == "You don't have permission to perform this action"


def test_role_is_read_from_database_not_token(client, student):
    forged = create_access_token(
        data={"sub": student.username}, role="faculty", user_id=student.id
    )

    response = client.get(
        "/faculty/classes/create", headers={"Authorization": f"Bearer {forged}"}
    )

    assert response.status_code == 403
