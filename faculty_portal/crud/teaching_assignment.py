from sqlmodel import Session, select
from fastapi import HTTPException, status
from sqlalchemy.orm import joinedload

from faculty_portal.models.course import Course
from faculty_portal.models.teaching_assignment import TeachingAssignment
from faculty_portal.models.user import User
from faculty_portal.schemas.teaching_assignment import TeachingAssignmentCreate
from faculty_portal.utils.time_utils import get_utc_time


def create_teaching_assignment(
    db: Session, assignment: TeachingAssignmentCreate
) -> TeachingAssignment:
    """
    Assign a faculty member to a course.

    Validates that the user exists and has the faculty role, that the course
    exists, and that the pair is not already assigned.

    Args:
        db: Database session for transaction management
        assignment: Validated assignment data from request

    Returns:
        TeachingAssignment: Newly created assignment with generated ID

    Raises:
        HTTPException: 404 if the user or course is not found
        HTTPException: 400 if the user is not faculty or the pair already exists
    """
    user = db.get(User, assignment.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {assignment.user_id} not found",
        )
    if user.role != "faculty":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"User with ID {assignment.user_id} is not a faculty member",
        )

    if db.get(Course, assignment.course_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course with ID {assignment.course_id} not found",
        )

    existing = db.exec(
        select(TeachingAssignment).where(
            TeachingAssignment.user_id == assignment.user_id,
            TeachingAssignment.course_id == assignment.course_id,
        )
    ).first()
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="This faculty member is already assigned to the course",
        )

    db_assignment = TeachingAssignment(
        user_id=assignment.user_id,
        course_id=assignment.course_id,
        created_at=get_utc_time(),
    )
    db.add(db_assignment)
    db.commit()
    db.refresh(db_assignment)
    return db_assignment


def get_teaching_assignments(
    db: Session, skip: int = 0, limit: int = 100
) -> list[TeachingAssignment]:
    """Return assignments with their course eagerly loaded."""
    query = (
        select(TeachingAssignment)
        .options(joinedload(TeachingAssignment.course))
        .order_by(TeachingAssignment.id)
        .offset(skip)
        .limit(limit)
    )
    return db.exec(query).all()


def delete_teaching_assignment(db: Session, assignment_id: int) -> TeachingAssignment:
    db_assignment = db.get(TeachingAssignment, assignment_id)
    if db_assignment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teaching assignment with ID {assignment_id} not found",
        )
    db.delete(db_assignment)
    db.commit()
    return db_assignment
