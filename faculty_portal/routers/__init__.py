from fastapi import APIRouter
from .class_session import router as class_session_router
from .course import router as course_router
from .teaching_assignment import router as teaching_assignment_router
from .user import router as user_router

router = APIRouter()

router.include_router(class_session_router)
router.include_router(course_router)
router.include_router(teaching_assignment_router)
router.include_router(user_router)
