from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from faculty_portal.dependencies import (
    get_assigned_course_ids,
    get_current_faculty,
    get_db,
    get_submitting_faculty,
)
from faculty_portal.schemas.class_session import (
    ClassFormContext,
    ClassSessionCreated,
    ClassSessionForm,
    ClassSessionRead,
)
from faculty_portal.crud.class_session import (
    get_class_session,
    get_class_sessions_for_courses,
)
from faculty_portal.services.class_session_service import (
    get_form_context,
    submit_class_session,
)

# Access Control: FACULTY
# - Faculty can only schedule and view sessions of courses they teach

router = APIRouter(
    prefix="/faculty/classes",
    tags=["faculty-classes"],
    responses={404: {"description": "Not found"}},
)


@router.get("/create", response_model=ClassFormContext)
def read_class_form_endpoint(
    db: Session = Depends(get_db),
    faculty=Depends(get_current_faculty),
):
    """
    Load everything the "Schedule a New Class" form needs.

    Returns the courses the faculty member teaches ordered by code, the course
    preselected in the dropdown, and an error message when there is nothing
    to schedule for. Submission is disabled when no course is available.

    Access Level: FACULTY
    """
    return get_form_context(db, faculty)


@router.post(
    "", response_model=ClassSessionCreated, status_code=status.HTTP_201_CREATED
)
def create_class_session_endpoint(
    form: ClassSessionForm,
    db: Session = Depends(get_db),
    faculty=Depends(get_submitting_faculty),
):
    """
    Schedule a class session from the submitted form.

    On success the response carries the stored session, the success message,
    the reset form (the selected course is kept) and where to redirect the
    user afterwards. Validation failures return 400 with the message to show.

    Access Level: FACULTY
    """
    return submit_class_session(db, faculty, form)


@router.get("", response_model=List[ClassSessionRead])
def read_class_sessions_endpoint(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    faculty=Depends(get_current_faculty),
):
    """List the sessions of every course the faculty member teaches, earliest first."""
    course_ids = get_assigned_course_ids(db, faculty.id)
    return get_class_sessions_for_courses(db, course_ids, skip=skip, limit=limit)


@router.get("/{session_id}", response_model=ClassSessionRead)
def read_class_session_endpoint(
    session_id: int,
    db: Session = Depends(get_db),
    faculty=Depends(get_current_faculty),
):
    class_session = get_class_session(db, session_id)
    if class_session is None:
        raise HTTPException(status_code=404, detail="Class session not found")

    if class_session.course_id not in get_assigned_course_ids(db, faculty.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only view sessions of courses you teach",
        )

    return class_session
