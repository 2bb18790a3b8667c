from fastapi import HTTPException, status
from sqlmodel import Session, select

from faculty_portal.models.user import User
from faculty_portal.schemas.user import UserCreate
from faculty_portal.utils.authentication import get_password_hash
from faculty_portal.utils.time_utils import get_utc_time


def create_user(db: Session, user: UserCreate) -> User:
    """
    Create a new user account with a hashed password.

    Args:
        db: Database session for transaction management
        user: Validated user data from the request

    Returns:
        User: Newly created user with generated ID

    Raises:
        HTTPException: 400 if the username is already taken
    """
    if get_user_by_username(db, user.username) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Username {user.username} is already taken",
        )

    now = get_utc_time()
    db_user = User(
        username=user.username,
        password=get_password_hash(user.password),
        full_name=user.full_name,
        email=user.email,
        role=user.role,
        created_at=now,
        updated_at=now,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_users(db: Session, skip: int = 0, limit: int = 100) -> list[User]:
    return db.exec(select(User).order_by(User.id).offset(skip).limit(limit)).all()


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.exec(select(User).where(User.username == username)).first()
