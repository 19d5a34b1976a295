"""Application configuration helpers."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Runtime configuration read from environment variables."""

    app_name: str = Field(default="flexo-waitlist")
    environment: str = Field(default="local")
    log_level: str = Field(default="INFO")

    # Resend credentials, checked per request rather than at startup
    resend_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("WAITLIST_API_RESEND_API_KEY", "RESEND_API_KEY"),
    )
    resend_audience_id: str = Field(
        default="",
        validation_alias=AliasChoices("WAITLIST_API_RESEND_AUDIENCE_ID", "RESEND_AUDIENCE_ID"),
    )
    resend_api_url: str = Field(default="https://api.resend.com")

    # Confirmation email settings
    email_from: str = Field(default="Flexo <bonjour@flexo.app>")
    email_subject: str = Field(default="Tu es sur la liste Flexo 🎉")

    model_config = SettingsConfigDict(
        env_prefix="WAITLIST_API_",
        case_sensitive=False,
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def resend_configured(self) -> bool:
        return bool(self.resend_api_key and self.resend_audience_id)


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings object so expensive IO only runs once."""

    return Settings()
