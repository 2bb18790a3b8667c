from typing import Optional
from datetime import timedelta
from fastapi import HTTPException, status
from jose import jwt
from passlib.context import CryptContext
from sqlmodel import Session, select

from faculty_portal.config import settings
from faculty_portal.models.user import User
from faculty_portal.utils.time_utils import get_utc_time

SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a password hash."""
    return pwd_context.hash(password)


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Look up a user by username and check the password.
    Every role signs in through the same table; the role travels in the token.
    """
    user = db.exec(select(User).where(User.username == username)).first()
    if user and verify_password(password, user.password):
        return user

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Incorrect username or password",
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    role: str = None,
    user_id: int = None,
):
    """Create a JWT access token with the user's role and ID."""
    to_encode = data.copy()

    if expires_delta:
        expire = get_utc_time() + expires_delta
    else:
        expire = get_utc_time() + timedelta(minutes=15)

    to_encode.update({"exp": expire})
    if role:
        to_encode.update({"role": role})
    if user_id:
        to_encode.update({"user_id": user_id})

    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

    return encoded_jwt
