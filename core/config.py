from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Forum API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = """
    Discussion forum API.

    ## Features
    * Topic creation and editing
    * Replies to topics
    * Topic subscriptions
    * Participant lists and last activity per topic
    """
    DOCS_URL: str = "/docs"
    REDOC_URL: str = "/redoc"
    OPENAPI_URL: str = "/openapi.json"
    OPENAPI_TAGS: list[dict] = [
        {
            "name": "topics",
            "description": "Topic creation, replies, participants and subscriptions"
        },
    ]

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost"]

    # Database
    DATABASE_URL: str = "sqlite:///forum.db"
    TEST_DATABASE_URL: str = "sqlite://"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    # .env lives next to main.py
    backend_dir = Path(__file__).resolve().parent.parent
    return Settings(_env_file=backend_dir / ".env")
