from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_NAME: str = "Folio"
    APP_ENV: Literal["development", "production"] = "production"
    PORT: int = 8000
    HOST_NAME: str = "http://localhost:8000"

    REDIS_URL: str = "redis://redis:6379/0"
    # Maximum number of connections Redis client will open per process
    REDIS_MAX_CONNECTIONS: int = 20
    REDIS_USER_KEY: str = "folio:user:"
    USER_CACHE_TTL_SECONDS: int = 300
    # Unknown ids stay remembered well past the record cache; store_user clears them
    MISSING_USER_TTL_SECONDS: int = 86400

    # Fernet key material for the viewer session cookie
    SESSION_SECRET: str = "change-me"
    SESSION_COOKIE_NAME: str = "folio_session"
    SESSION_MAX_AGE_SECONDS: int = 14 * 24 * 3600

    TIMEZONE_API_URL: str = "https://timeapi.io/api/TimeZone/coordinate"
    TIMEZONE_API_KEY: str | None = None
    TIMEZONE_LOOKUP_TIMEOUT: float = 5.0

    YOUTUBE_API_KEY: str | None = None
    YOUTUBE_MAX_RESULTS: int = 20

    GRAVATAR_BASE_URL: str = "https://www.gravatar.com/avatar"
    GRAVATAR_SIZE: int = 150

    # "rails" mirrors distance_of_time_in_words, "coarse" only counts days/months/years
    MEMBERSHIP_DURATION_STYLE: Literal["rails", "coarse"] = "rails"
    VIDEO_DATE_FORMAT: str = "%Y-%m-%d"


settings = Settings()
