import logging
from typing import Generator, List
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session, SQLModel, create_engine, select
from jose import JWTError, jwt

from faculty_portal.config import settings
from faculty_portal.models import TeachingAssignment, User
from faculty_portal.schemas.token import TokenData
from faculty_portal.utils.authentication import SECRET_KEY, ALGORITHM

logger = logging.getLogger(__name__)

connect_args = (
    {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
)
engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    echo=settings.SQL_ECHO,
)

ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/token")

# Shown on the form page when a non-faculty user opens it
PAGE_FORBIDDEN_MESSAGE = "You do not have permission to access this page."
# Returned when a non-faculty user submits the form
ACTION_FORBIDDEN_MESSAGE = "You don't have permission to perform this action"


def create_db_and_tables():
    """Create database and tables if they don't exist"""
    SQLModel.metadata.create_all(engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency for getting the database session."""
    with Session(engine) as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


async def get_current_user(
    token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> User:
    """
    Resolve the authenticated user from the bearer token.
    The role stored in the database wins over the role claim in the token.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        token_data = TokenData(
            username=payload.get("sub"),
            role=payload.get("role"),
            user_id=payload.get("user_id"),
        )
    except JWTError:
        raise credentials_exception

    if token_data.username is None:
        raise credentials_exception

    user = db.exec(select(User).where(User.username == token_data.username)).first()
    if user is None:
        raise credentials_exception

    return user


def require_faculty(detail: str):
    """
    Creates a dependency that only lets users with the faculty role through.

    Args:
        detail: Message returned with the 403 response

    Returns:
        A dependency function returning the faculty user
    """

    async def validate_faculty(user: User = Depends(get_current_user)) -> User:
        if user.role != "faculty":
            logger.warning(
                f"User {user.username} with role {user.role} denied faculty access"
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
        return user

    return validate_faculty


get_current_faculty = require_faculty(PAGE_FORBIDDEN_MESSAGE)
get_submitting_faculty = require_faculty(ACTION_FORBIDDEN_MESSAGE)


async def get_current_admin(user: User = Depends(get_current_user)) -> User:
    """Get current user only if admin"""
    if user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized as admin"
        )
    return user


def get_assigned_course_ids(db: Session, user_id: int) -> List[int]:
    """
    Get the IDs of all courses a faculty member teaches.

    Args:
        db: Database session
        user_id: The ID of the faculty user

    Returns:
        List of course IDs from the user's teaching assignments
    """
    query = select(TeachingAssignment.course_id).where(
        TeachingAssignment.user_id == user_id
    )
    return list(db.exec(query).all())
