"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

Decision on the captcha secret: CAPTCHA_SECRET_KEY is the signing secret for
challenge tokens. SECRET_KEY is accepted as a fallback so deployments that
already export a generic secret keep working (handled in AppSettings via
model_validator).
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Empty means "generate a random secret per process"; tokens then do not
    # survive a restart and are not shared between workers.
    captcha_secret_key: str = ""

    captcha_length: int = Field(default=6, ge=1, le=32)
    # Ambiguous glyphs (0/O, 1/I/L) are left out on purpose
    captcha_alphabet: str = Field(
        default="ABCDEFGHJKLMNPQRSTUVWXYZ23456789", min_length=2
    )
    captcha_image_width: int = Field(default=240, gt=0)
    captcha_image_height: int = Field(default=80, gt=0)
    # TTF font paths; empty list uses the fonts bundled with `captcha`
    captcha_fonts: list[str] = []

    captcha_ttl_seconds: int = Field(default=300, gt=0)
    captcha_case_sensitive: bool = False


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class SentrySettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sentry_dsn: str = ""
    sentry_send_pii: bool = False
    sentry_traces_sample_rate: float = 0.1
    sentry_profile_sample_rate: float = 0.05


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Core
    secret_key: str = ""  # fallback for captcha_secret_key
    env: str = "development"
    app_name: str = "captcha-service"

    # Routes are mounted as {api_prefix}/captcha/...
    api_prefix: str = "/api"

    # CORS — all origins allowed by default
    cors_origins: list[str] = ["*"]

    # OpenAPI docs URL (None disables the docs UI in production)
    docs_url: Optional[str] = "/docs"

    # Sub-configs (composed via model_validator below)
    captcha: Optional[CaptchaSettings] = None
    logging: Optional[LoggingSettings] = None
    sentry: Optional[SentrySettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs_and_secret(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.captcha is None:
            self.captcha = CaptchaSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        if self.sentry is None:
            self.sentry = SentrySettings()

        # Accept SECRET_KEY as a fallback for the captcha signing secret
        if not self.captcha.captcha_secret_key and self.secret_key:
            self.captcha.captcha_secret_key = self.secret_key

        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
