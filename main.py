import logging
from datetime import timedelta

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
import uvicorn

from faculty_portal.config import settings, setup_logging
from faculty_portal.dependencies import (
    create_db_and_tables,
    get_db,
    ACCESS_TOKEN_EXPIRE_MINUTES,
)
from faculty_portal.routers import router
from faculty_portal.schemas.token import Token
from faculty_portal.utils.authentication import authenticate, create_access_token

setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Faculty Portal API",
    description="Lets faculty schedule class sessions for the courses they teach",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# Event handler to create database and tables on startup
@app.on_event("startup")
def on_startup():
    create_db_and_tables()


@app.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)
):
    """
    OAuth2 compatible token login endpoint.
    The returned token carries the user's role, which gates the faculty pages.
    """
    try:
        user = authenticate(db, form_data.username, form_data.password)
        logger.info(f"User {user.username} signed in as {user.role}")

        access_token = create_access_token(
            data={"sub": user.username},
            expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
            role=user.role,
            user_id=user.id,
        )

        return {
            "access_token": access_token,
            "token_type": "bearer",
            "role": user.role,
            "user_id": user.id,
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Login failed: {str(e)}",
        )


@app.get("/")
async def root():
    return {
        "message": "Welcome to the Faculty Portal API. Visit /docs for API documentation."
    }


app.include_router(router)


if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
