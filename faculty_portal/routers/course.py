from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List

from faculty_portal.dependencies import get_current_admin, get_db
from faculty_portal.schemas.course import CourseCreate, CourseRead
from faculty_portal.crud.course import create_course, get_courses


router = APIRouter(
    prefix="/courses",
    tags=["courses"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[CourseRead])
def read_courses_endpoint(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Retrieve all courses ordered by code.

    Access Level: ADMIN only
    """
    return get_courses(db, skip=skip, limit=limit)


@router.post("/", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
def create_course_endpoint(
    course: CourseCreate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Create a new course.

    Faculty only see the course on the scheduling form once they are assigned
    to it through a teaching assignment.

    Access Level: ADMIN only
    """
    return create_course(db=db, course=course)
