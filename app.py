"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import AppSettings
from errors import register_error_handlers
from infrastructure.captcha.image_captcha import ImageCaptchaService
from infrastructure.captcha.protocol import CaptchaService
from routes.captcha_routes import router as captcha_router
from routes.health_routes import router as health_router
from shared.generators import generate_secure_token
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)


def build_captcha_service(settings: AppSettings) -> CaptchaService:
    """Build the production CaptchaService from settings.

    Without a configured secret a random one is generated: tokens then only
    verify within this process.
    """
    captcha_settings = settings.captcha
    if not captcha_settings.captcha_secret_key:
        log.warning("captcha_secret_not_configured", fallback="per_process_random")
        captcha_settings = captcha_settings.model_copy(
            update={"captcha_secret_key": generate_secure_token(32)}
        )
    return ImageCaptchaService.from_settings(captcha_settings)


def create_app(
    settings: Optional[AppSettings] = None,
    captcha_service: Optional[CaptchaService] = None,
) -> FastAPI:
    """Create and return a fully configured FastAPI application.

    ``captcha_service`` overrides the production implementation (tests).
    """
    if settings is None:
        settings = AppSettings()

    setup_logging(settings.logging)

    # Initialise Sentry before anything else so it captures startup errors
    if settings.sentry.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry.sentry_dsn,
            environment=settings.env,
            send_default_pii=settings.sentry.sentry_send_pii,
            traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
            profiles_sample_rate=settings.sentry.sentry_profile_sample_rate,
        )

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Issues and verifies image captcha challenges.",
        docs_url=settings.docs_url,
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.captcha_service = captcha_service or build_captcha_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(captcha_router, prefix=settings.api_prefix)

    log.info("app_created", env=settings.env, api_prefix=settings.api_prefix)
    return app
