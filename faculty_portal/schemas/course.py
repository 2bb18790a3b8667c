from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class CourseBase(BaseModel):
    code: str = Field(min_length=1, max_length=20)
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CourseCreate(CourseBase):
    pass


class CourseRead(CourseBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CourseOption(BaseModel):
    """One entry of the course dropdown, rendered as "code - title"."""

    id: int
    code: str
    title: str
    label: str
