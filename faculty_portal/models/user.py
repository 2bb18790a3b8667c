from sqlmodel import SQLModel, Field, Relationship
from typing import TYPE_CHECKING, Optional, List
from datetime import datetime

from faculty_portal.utils.time_utils import get_utc_time

if TYPE_CHECKING:
    from faculty_portal.models.teaching_assignment import TeachingAssignment


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    password: str = Field()
    full_name: str = Field(max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    # One of faculty, student or admin; checked by UserCreate
    role: str = Field(max_length=20)
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)

    teaching_assignments: List["TeachingAssignment"] = Relationship(
        back_populates="user"
    )
