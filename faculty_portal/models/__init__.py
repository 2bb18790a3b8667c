# Import all models to make them available from faculty_portal.models
from faculty_portal.models.user import User
from faculty_portal.models.course import Course
from faculty_portal.models.teaching_assignment import TeachingAssignment
from faculty_portal.models.class_session import ClassSession


# Export all models
__all__ = [
    "User",
    "Course",
    "TeachingAssignment",
    "ClassSession",
]
