from typing import List
from sqlmodel import Session, col, select
from fastapi import HTTPException, status

from faculty_portal.models.course import Course
from faculty_portal.schemas.course import CourseCreate
from faculty_portal.utils.time_utils import get_utc_time


def get_courses(db: Session, skip: int = 0, limit: int = 100) -> list[Course]:
    """Return courses ordered by code, with pagination."""
    return db.exec(select(Course).order_by(Course.code).offset(skip).limit(limit)).all()


def get_courses_by_ids(db: Session, course_ids: List[int]) -> list[Course]:
    """
    Fetch the courses whose ID is in the given list, ordered by code.

    An empty ID list short-circuits to an empty result without querying.
    """
    if not course_ids:
        return []
    query = select(Course).where(col(Course.id).in_(course_ids)).order_by(Course.code)
    return db.exec(query).all()


def get_course_by_id(db: Session, course_id: int) -> Course:
    course = db.get(Course, course_id)
    if course is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course with ID {course_id} not found",
        )
    return course


def create_course(db: Session, course: CourseCreate) -> Course:
    """
    Create a new course after checking that its code is free.

    Raises:
        HTTPException: 400 if another course already uses the code
    """
    existing = db.exec(select(Course).where(Course.code == course.code)).first()
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Course with code {course.code} already exists",
        )

    db_course = Course(
        code=course.code,
        title=course.title,
        description=course.description,
        created_at=get_utc_time(),
    )
    db.add(db_course)
    db.commit()
    db.refresh(db_course)
    return db_course
