from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List

from faculty_portal.dependencies import get_current_admin, get_db
from faculty_portal.schemas.user import UserCreate, UserRead
from faculty_portal.crud.user import create_user, get_users


router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(
    user: UserCreate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Create a new user account.
    Requires admin authentication. The password is stored hashed.
    """
    return create_user(db=db, user=user)


@router.get("/", response_model=List[UserRead])
def read_users_endpoint(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Retrieve a list of all users with pagination support.
    Requires admin authentication.
    """
    return get_users(db, skip=skip, limit=limit)
