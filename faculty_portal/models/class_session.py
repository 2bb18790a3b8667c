from sqlmodel import SQLModel, Field, Relationship
from typing import TYPE_CHECKING, Optional
from datetime import datetime

from faculty_portal.utils.time_utils import get_utc_time

if TYPE_CHECKING:
    from faculty_portal.models.course import Course


class ClassSession(SQLModel, table=True):
    __tablename__ = "class_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    course_id: int = Field(foreign_key="courses.id", ondelete="CASCADE", index=True)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None)
    # Stored in UTC
    start_time: datetime = Field()
    end_time: datetime = Field()
    meeting_link: Optional[str] = Field(default=None)
    created_by: int = Field(foreign_key="users.id")
    reminder_sent: bool = Field(default=False)
    created_at: datetime = Field(default_factory=get_utc_time)
    updated_at: datetime = Field(default_factory=get_utc_time)

    course: Optional["Course"] = Relationship(back_populates="class_sessions")
