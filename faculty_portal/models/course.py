from sqlmodel import SQLModel, Field, Relationship
from typing import TYPE_CHECKING, Optional, List
from datetime import datetime

from faculty_portal.utils.time_utils import get_utc_time

if TYPE_CHECKING:
    from faculty_portal.models.teaching_assignment import TeachingAssignment
    from faculty_portal.models.class_session import ClassSession


class Course(SQLModel, table=True):
    __tablename__ = "courses"

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=20)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=get_utc_time)

    teaching_assignments: List["TeachingAssignment"] = Relationship(
        back_populates="course"
    )
    class_sessions: List["ClassSession"] = Relationship(back_populates="course")
