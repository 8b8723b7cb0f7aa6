import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./quicksearch.db"
    DATABASE_ECHO: bool = False

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Workspace Quick Search"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Search
    SEARCH_MAX_SUGGESTIONS: int = 100
    SEARCH_EXACT_CASE_SENSITIVE: bool = True

    @field_validator('DATABASE_URL', mode='before')
    @classmethod
    def validate_database_url(cls, v):
        if not v or not str(v).strip():
            raise ValueError('DATABASE_URL cannot be empty')
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'LOG_LEVEL must be a logging level name, got {v!r}')
        return level

    @field_validator('SEARCH_MAX_SUGGESTIONS')
    @classmethod
    def validate_max_suggestions(cls, v):
        if v <= 0:
            raise ValueError('SEARCH_MAX_SUGGESTIONS must be a positive integer')
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")


settings = Settings()
