from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List

from faculty_portal.dependencies import get_current_admin, get_db
from faculty_portal.schemas.teaching_assignment import (
    TeachingAssignmentCreate,
    TeachingAssignmentRead,
)
from faculty_portal.crud.teaching_assignment import (
    create_teaching_assignment,
    delete_teaching_assignment,
    get_teaching_assignments,
)


router = APIRouter(
    prefix="/teaching-assignments",
    tags=["teaching-assignments"],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "/", response_model=TeachingAssignmentRead, status_code=status.HTTP_201_CREATED
)
def create_teaching_assignment_endpoint(
    assignment: TeachingAssignmentCreate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Assign a faculty member to a course.

    The assignment is what makes the course appear on the faculty member's
    scheduling form and lets them create sessions for it.

    Access Level: ADMIN only
    """
    return create_teaching_assignment(db=db, assignment=assignment)


@router.get("/", response_model=List[TeachingAssignmentRead])
def read_teaching_assignments_endpoint(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Retrieve all teaching assignments with pagination.

    Access Level: ADMIN only
    """
    return get_teaching_assignments(db, skip=skip, limit=limit)


@router.delete("/{assignment_id}")
def delete_teaching_assignment_endpoint(
    assignment_id: int,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Remove a teaching assignment, revoking the faculty member's access to the course.

    Access Level: ADMIN only
    """
    delete_teaching_assignment(db, assignment_id=assignment_id)
    return {"message": "Teaching assignment successfully deleted"}
