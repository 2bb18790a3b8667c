import logging
import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings:
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        f"sqlite:///{os.path.join(os.path.dirname(BASE_DIR), 'faculty_portal.db')}",
    )
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "default-fallback-key")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
    # Offset used to read the date/time typed into the form
    LOCAL_UTC_OFFSET_HOURS: float = float(os.getenv("LOCAL_UTC_OFFSET_HOURS", "0"))
    CORS_ORIGINS: list = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    CLASS_LIST_PATH: str = "/dashboard/faculty/classes"
    REDIRECT_DELAY_SECONDS: int = 2


settings = Settings()


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
