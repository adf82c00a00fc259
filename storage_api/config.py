# storage_api/config.py
from pathlib import Path
from typing import ClassVar

from pydantic_settings import BaseSettings

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./storage_api.db"
    DATABASE_ECHO: bool = False

    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8080

    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Create missing tables on application startup
    CREATE_TABLES: bool = True

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"


def normalize_database_url(url: str) -> str:
    """Rewrites provider-style URLs into the dialect names SQLAlchemy expects."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    if url.startswith("mysql://"):
        return url.replace("mysql://", "mysql+pymysql://", 1)
    return url


settings = Settings()
