from .user import UserCreate, UserRead
from .course import CourseCreate, CourseRead, CourseOption
from .teaching_assignment import TeachingAssignmentCreate, TeachingAssignmentRead
from .class_session import (
    ClassFormContext,
    ClassSessionCreate,
    ClassSessionCreated,
    ClassSessionForm,
    ClassSessionRead,
    FormMessage,
)
from .token import Token, TokenData

__all__ = [
    "UserCreate",
    "UserRead",
    "CourseCreate",
    "CourseRead",
    "CourseOption",
    "TeachingAssignmentCreate",
    "TeachingAssignmentRead",
    "ClassFormContext",
    "ClassSessionCreate",
    "ClassSessionCreated",
    "ClassSessionForm",
    "ClassSessionRead",
    "FormMessage",
    "Token",
    "TokenData",
]
