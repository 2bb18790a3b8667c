import logging
from typing import List

from fastapi import HTTPException, status
from pydantic import HttpUrl, TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from faculty_portal.config import settings
from faculty_portal.crud.class_session import create_class_session
from faculty_portal.crud.course import get_courses_by_ids
from faculty_portal.dependencies import get_assigned_course_ids
from faculty_portal.models.user import User
from faculty_portal.schemas.class_session import (
    ClassFormContext,
    ClassSessionCreate,
    ClassSessionCreated,
    ClassSessionForm,
    ClassSessionRead,
    FormMessage,
)
from faculty_portal.schemas.course import CourseOption
from faculty_portal.utils.time_utils import local_to_utc

logger = logging.getLogger(__name__)

NOT_ASSIGNED_MESSAGE = (
    "You are not assigned to any courses. Please contact an administrator."
)
NO_COURSES_MESSAGE = "No courses found. Please contact an administrator."
LOAD_FAILED_MESSAGE = "Failed to load courses. Please refresh the page."
REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"
INVALID_DATETIME_MESSAGE = "Invalid date or time format"
END_BEFORE_START_MESSAGE = "End time must be after start time"
INVALID_MEETING_LINK_MESSAGE = "Meeting link must be a valid URL"
COURSE_NOT_ASSIGNED_MESSAGE = "You are not assigned to this course"
CREATED_MESSAGE = "Class session created successfully"

_http_url = TypeAdapter(HttpUrl)


def _form_error(detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
    return HTTPException(status_code=status_code, detail=detail)


def get_form_context(db: Session, user: User) -> ClassFormContext:
    """
    Load the courses a faculty member may schedule classes for.

    Runs two reads in sequence: the user's teaching assignments, then the
    matching courses ordered by code. An empty result at either step is not
    an error; the returned context carries an error message and disables
    submission instead.

    Args:
        db: Database session
        user: The authenticated faculty user

    Returns:
        ClassFormContext: Course options, the preselected course and a message

    Raises:
        HTTPException: 500 if either read fails
    """
    try:
        course_ids = get_assigned_course_ids(db, user.id)
        if not course_ids:
            return ClassFormContext(
                message=FormMessage(text=NOT_ASSIGNED_MESSAGE, type="error")
            )

        courses = get_courses_by_ids(db, course_ids)
    except SQLAlchemyError:
        logger.exception(f"Error fetching courses for user {user.id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=LOAD_FAILED_MESSAGE,
        )

    if not courses:
        return ClassFormContext(
            message=FormMessage(text=NO_COURSES_MESSAGE, type="error")
        )

    options = [
        CourseOption(
            id=course.id,
            code=course.code,
            title=course.title,
            label=f"{course.code} - {course.title}",
        )
        for course in courses
    ]
    default_course_id = options[0].id
    return ClassFormContext(
        courses=options,
        default_course_id=default_course_id,
        can_submit=True,
        form=ClassSessionForm(course_id=str(default_course_id)),
    )


def validate_class_session_form(
    form: ClassSessionForm, assigned_course_ids: List[int]
) -> ClassSessionCreate:
    """
    Check the submitted form and turn it into the values to store.

    Checks run in order and the first failure is reported:
    required fields, date/time parsing, end after start, meeting link,
    and finally whether the course is one the user teaches.
    """
    required = (
        form.course_id,
        form.title,
        form.start_date,
        form.start_time,
        form.end_date,
        form.end_time,
    )
    if any(not value.strip() for value in required):
        raise _form_error(REQUIRED_FIELDS_MESSAGE)

    try:
        start = local_to_utc(form.start_date.strip(), form.start_time.strip())
        end = local_to_utc(form.end_date.strip(), form.end_time.strip())
    except ValueError:
        raise _form_error(INVALID_DATETIME_MESSAGE)

    if end <= start:
        raise _form_error(END_BEFORE_START_MESSAGE)

    meeting_link = form.meeting_link.strip() or None
    if meeting_link is not None:
        try:
            _http_url.validate_python(meeting_link)
        except ValidationError:
            raise _form_error(INVALID_MEETING_LINK_MESSAGE)

    try:
        course_id = int(form.course_id)
    except ValueError:
        course_id = None
    if course_id not in assigned_course_ids:
        raise _form_error(COURSE_NOT_ASSIGNED_MESSAGE, status.HTTP_403_FORBIDDEN)

    return ClassSessionCreate(
        course_id=course_id,
        title=form.title.strip(),
        description=form.description.strip() or None,
        start_time=start,
        end_time=end,
        meeting_link=meeting_link,
    )


def submit_class_session(
    db: Session, user: User, form: ClassSessionForm
) -> ClassSessionCreated:
    """
    Validate the form, insert the class session and describe the next UI state.

    Args:
        db: Database session
        user: The authenticated faculty user
        form: Raw form values

    Returns:
        ClassSessionCreated: Success message, stored row, reset form and redirect

    Raises:
        HTTPException: 400/403 for validation failures
        HTTPException: 500 if the insert fails or returns nothing
    """
    try:
        assigned_course_ids = get_assigned_course_ids(db, user.id)
    except SQLAlchemyError as e:
        logger.exception(f"Error fetching teaching assignments for user {user.id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create class session: Database error: {e}",
        )

    class_session = validate_class_session_form(form, assigned_course_ids)

    try:
        db_class_session = create_class_session(db, class_session, created_by=user.id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error creating class session: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create class session: Database error: {e}",
        )

    if db_class_session is None or db_class_session.id is None:
        logger.error("No data returned from database after insert")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create class session: No data returned from database after insert",
        )

    logger.info(
        f"User {user.id} scheduled class session {db_class_session.id} "
        f"for course {db_class_session.course_id}"
    )

    return ClassSessionCreated(
        message=FormMessage(text=CREATED_MESSAGE, type="success"),
        class_session=ClassSessionRead.model_validate(db_class_session),
        form=form.reset(),
        redirect_to=settings.CLASS_LIST_PATH,
        redirect_delay_seconds=settings.REDIRECT_DELAY_SECONDS,
    )
