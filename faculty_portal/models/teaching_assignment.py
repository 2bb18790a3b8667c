from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field, Relationship
from typing import TYPE_CHECKING, Optional
from datetime import datetime

from faculty_portal.utils.time_utils import get_utc_time

if TYPE_CHECKING:
    from faculty_portal.models.user import User
    from faculty_portal.models.course import Course


class TeachingAssignment(SQLModel, table=True):
    __tablename__ = "teaching_assignments"
    __table_args__ = (UniqueConstraint("user_id", "course_id"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    course_id: int = Field(foreign_key="courses.id", ondelete="CASCADE")
    created_at: datetime = Field(default_factory=get_utc_time)

    user: Optional["User"] = Relationship(back_populates="teaching_assignments")
    course: Optional["Course"] = Relationship(back_populates="teaching_assignments")
