from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

from faculty_portal.schemas.course import CourseBase


class TeachingAssignmentBase(BaseModel):
    user_id: int
    course_id: int


class TeachingAssignmentCreate(TeachingAssignmentBase):
    pass


class TeachingAssignmentRead(TeachingAssignmentBase):
    id: int
    created_at: datetime
    course: Optional[CourseBase] = None

    model_config = ConfigDict(from_attributes=True)
