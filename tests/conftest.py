import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from main import app
from faculty_portal.dependencies import get_db
from faculty_portal.models import Course, TeachingAssignment, User
from faculty_portal.utils.authentication import create_access_token, get_password_hash

PASSWORD = "secret-pass"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, username, role):
    user = User(
        username=username,
        password=get_password_hash(PASSWORD),
        full_name=username.title(),
        email=f"{username}@example.edu",
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user):
    token = create_access_token(
        data={"sub": user.username}, role=user.role, user_id=user.id
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def faculty(db):
    return make_user(db, "faculty", "faculty")


@pytest.fixture
def admin(db):
    return make_user(db, "admin", "admin")


@pytest.fixture
def student(db):
    return make_user(db, "student", "student")


@pytest.fixture
def courses(db):
    # Inserted out of code order so ordering is observable
    created = []
    for code, title in [
        ("IS301", "Information Systems"),
        ("CS101", "Intro to Programming"),
        ("MA201", "Linear Algebra"),
    ]:
        course = Course(code=code, title=title)
        db.add(course)
        db.commit()
        db.refresh(course)
        created.append(course)
    return created


@pytest.fixture
def assigned_courses(db, faculty, courses):
    """Assign the faculty user to IS301 and CS101, leaving MA201 unassigned."""
    for course in courses[:2]:
        db.add(TeachingAssignment(user_id=faculty.id, course_id=course.id))
    db.commit()
    return courses[:2]
