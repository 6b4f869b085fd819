# ticketlog/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./ticketlog.db")
    APP_NAME: str = "Ticketlog API"
    APP_DESC: str = "Ticketing and activity logging with role-based access"
    APP_VERSION: str = "1.0.0"

    # CORS origins, comma separated
    CORS_ORIGINS: str | None = None

    # Sessions
    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_MAX_AGE: int = 24 * 60 * 60
    SESSION_COOKIE_SECURE: bool = False  # set to true behind HTTPS

    # Uploads
    UPLOAD_DIR: str = "./uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    DEFAULT_PHOTO: str = "/uploads/default.png"

    DEFAULT_COMPANY_NAME: str = "Acme Corp"
    BCRYPT_ROUNDS: int = 12
    LOG_LEVEL: str = "INFO"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
