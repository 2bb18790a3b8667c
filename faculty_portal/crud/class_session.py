from typing import List
from sqlmodel import Session, col, select

from faculty_portal.models.class_session import ClassSession
from faculty_portal.schemas.class_session import ClassSessionCreate
from faculty_portal.utils.time_utils import get_utc_time


def create_class_session(
    db: Session, class_session: ClassSessionCreate, created_by: int
) -> ClassSession:
    """
    Insert a class session row and read it back.

    Store errors propagate to the caller, which owns the rollback and the
    message shown to the user.
    """
    db_class_session = ClassSession(
        course_id=class_session.course_id,
        title=class_session.title,
        description=class_session.description,
        start_time=class_session.start_time,
        end_time=class_session.end_time,
        meeting_link=class_session.meeting_link,
        created_by=created_by,
        reminder_sent=False,
        updated_at=get_utc_time(),
    )
    db.add(db_class_session)
    db.commit()
    db.refresh(db_class_session)
    return db_class_session


def get_class_sessions_for_courses(
    db: Session, course_ids: List[int], skip: int = 0, limit: int = 100
) -> list[ClassSession]:
    if not course_ids:
        return []
    query = (
        select(ClassSession)
        .where(col(ClassSession.course_id).in_(course_ids))
        .order_by(ClassSession.start_time)
        .offset(skip)
        .limit(limit)
    )
    return db.exec(query).all()


def get_class_session(db: Session, session_id: int) -> ClassSession | None:
    return db.get(ClassSession, session_id)
