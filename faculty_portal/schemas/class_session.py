from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional
from datetime import datetime

from faculty_portal.schemas.course import CourseOption


class FormMessage(BaseModel):
    text: str = ""
    type: Literal["", "success", "error"] = ""


class ClassSessionForm(BaseModel):
    """Raw values of the "Schedule a New Class" form.

    Every field is kept as the submitted string so that missing values are
    reported with the form's own message instead of a schema error.
    """

    course_id: str = Field(default="", alias="courseId")
    title: str = ""
    description: str = ""
    start_date: str = Field(default="", alias="startDate")
    start_time: str = Field(default="", alias="startTime")
    end_date: str = Field(default="", alias="endDate")
    end_time: str = Field(default="", alias="endTime")
    meeting_link: str = Field(default="", alias="meetingLink")

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_blank(cls, value):
        return "" if value is None else value

    def reset(self) -> "ClassSessionForm":
        """Blank every field except the selected course."""
        return ClassSessionForm(course_id=self.course_id)


class ClassSessionCreate(BaseModel):
    course_id: int
    title: str
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    meeting_link: Optional[str] = None


class ClassSessionRead(BaseModel):
    id: int
    course_id: int
    title: str
    description: Optional[str]
    start_time: datetime
    end_time: datetime
    meeting_link: Optional[str]
    created_by: int
    reminder_sent: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ClassFormContext(BaseModel):
    courses: List[CourseOption] = []
    default_course_id: Optional[int] = None
    can_submit: bool = False
    message: FormMessage = Field(default_factory=FormMessage)
    form: ClassSessionForm = Field(default_factory=ClassSessionForm)

    model_config = ConfigDict(populate_by_name=True)


class ClassSessionCreated(BaseModel):
    message: FormMessage
    class_session: ClassSessionRead
    form: ClassSessionForm
    redirect_to: str
    redirect_delay_seconds: int
