"""
Environment configuration using Pydantic Settings.

Reads from environment variables and .env file. Django settings read
their values from here.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class EnvSettings(BaseSettings):
    """Deployment settings."""

    # Security
    secret_key: str = "change-me-in-production"
    debug: bool = False
    allowed_hosts: list[str] = ["localhost", "127.0.0.1"]

    # Database
    db_name: str = "db.sqlite3"

    # Branding and environment name used in operational mail
    app_name: str = "DocumentCloud"
    environment: str = "development"
    site_url: str = "http://localhost:8000"

    # Email transport
    email_backend: str = "django.core.mail.backends.smtp.EmailBackend"
    email_host: str = "localhost"
    email_port: int = 25
    email_host_user: str = ""
    email_host_password: str = ""
    email_use_tls: bool = False

    # Lifecycle mail addresses
    support_email: str = "support@documentcloud.org"
    no_reply_email: str = "no-reply@documentcloud.org"
    reports_email: str = "info@documentcloud.org"

    # Mail an alert for unhandled exceptions (production only)
    exception_notifications: bool = False

    # Contact form rate limit
    contact_rate: str = "20/hour"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_env() -> EnvSettings:
    """Get cached settings instance."""
    return EnvSettings()
