import os
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class AppSettings(BaseSettings):
    app_name: str = "SoulSync API"
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    # Users allowed to manage the healing ritual catalogue, e.g. SOULSYNC_ADMIN_USER_IDS=[1]
    admin_user_ids: List[int] = []

    model_config = SettingsConfigDict(env_prefix='SOULSYNC_')


class DatabaseSettings(BaseSettings):
    url: str = "sqlite+aiosqlite:///./soulsync.db"
    echo: bool = False

    model_config = SettingsConfigDict(env_prefix='DATABASE_')


class OpenAISettings(BaseSettings):
    api_key: Optional[str] = None
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o"
    timeout: float = 30.0
    max_retries: int = 3

    model_config = SettingsConfigDict(env_prefix='OPENAI_')


class SessionSettings(BaseSettings):
    secret: str = "change-me-in-production"
    cookie_name: str = "session"
    algorithm: str = "HS256"
    max_age_seconds: int = 60 * 60 * 24 * 7
    # In-progress assessment sessions
    assessment_ttl_seconds: int = 60 * 60 * 2
    max_assessments_per_user: int = 3

    model_config = SettingsConfigDict(env_prefix='SESSION_')


@lru_cache()
def get_settings() -> AppSettings:
    return AppSettings()


@lru_cache()
def get_database_settings() -> DatabaseSettings:
    return DatabaseSettings()


@lru_cache()
def get_openai_settings() -> OpenAISettings:
    return OpenAISettings()


@lru_cache()
def get_session_settings() -> SessionSettings:
    return SessionSettings()
