# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "registration-api")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./registration.db")
    POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))

    CORS_ORIGINS: list[str] = os.getenv("FRONTEND_URL", "*").split(",")

    SMTP_HOST: str = os.getenv("SMTP_HOST", "smtp.zoho.com")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "465"))
    SMTP_TIMEOUT: float = float(os.getenv("SMTP_TIMEOUT", "10.0"))
    MAIL_USERNAME: str = os.getenv("MAIL_USERNAME", os.getenv("ZOHO_EMAIL", ""))
    MAIL_PASSWORD: str = os.getenv("MAIL_PASSWORD", os.getenv("ZOHO_PASSWORD", ""))
    MAIL_FROM: str = os.getenv("MAIL_FROM", MAIL_USERNAME)
    CONTACT_RECEIVER_EMAIL: str = os.getenv("CONTACT_RECEIVER_EMAIL", "")

    PUBLIC_BASE_URL: str = os.getenv("PUBLIC_BASE_URL", "").rstrip("/")
    EVENT_NAME: str = os.getenv("EVENT_NAME", "SHC’25")
    EVENT_FULL_NAME: str = os.getenv("EVENT_FULL_NAME", "Summer Healing Campaign '25")
    EVENT_SITE_URL: str = os.getenv("EVENT_SITE_URL", "https://supernaturalcc.org")
    ORGANIZER_NAME: str = os.getenv("ORGANIZER_NAME", "Ayo Benson")
    BROADCAST_SUBJECT: str = os.getenv("BROADCAST_SUBJECT", "Important Update")

    STRIPE_SECRET_KEY: str = os.getenv("STRIPE_SECRET_KEY", "")
    PAYMENT_CURRENCY: str = os.getenv("PAYMENT_CURRENCY", "usd")
    PAYMENT_SUCCESS_URL: str = os.getenv(
        "PAYMENT_SUCCESS_URL", "https://summerhealingcampaign.org/payment-success"
    )
    PAYMENT_CANCEL_URL: str = os.getenv(
        "PAYMENT_CANCEL_URL", "https://summerhealingcampaign.org/payment-error"
    )

    STATIC_DIR: str = os.getenv("STATIC_DIR", "dist")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
