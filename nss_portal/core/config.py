# File: nss_portal/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
import logging
import os


class Settings(BaseSettings):
    # ---------------------------
    # Meta / Pydantic settings
    # ---------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # Ignore unexpected env vars instead of erroring
    )

    # ---------------------------
    # Storage (local SQLite fallback)
    # ---------------------------
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./nss_portal.db")
    STORAGE_KEY_PREFIX: str = os.getenv("STORAGE_KEY_PREFIX", "nss-")

    # ---------------------------
    # Project
    # ---------------------------
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "NSS Volunteer Portal")

    # ---------------------------
    # Approval workflow
    # ---------------------------
    DEFAULT_APPROVER: str = os.getenv("DEFAULT_APPROVER", "admin")
    DEFAULT_REJECTION_REASON: str = os.getenv("DEFAULT_REJECTION_REASON", "No reason provided")

    # ---------------------------
    # Portfolio / QR codes
    # ---------------------------
    PORTFOLIO_BASE_URL: str = os.getenv("PORTFOLIO_BASE_URL", "http://localhost:3000/portfolio")

    # ---------------------------
    # Environment / Logging
    # ---------------------------
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")  # development | staging | production
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ---------------------------
    # Derived / Convenience
    # ---------------------------
    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    def storage_key(self, name: str) -> str:
        """Full storage key for a collection name, e.g. "users" -> "nss-users"."""
        return f"{self.STORAGE_KEY_PREFIX}{name}"


settings = Settings()


def configure_logging(level: str = None) -> None:
    logging.basicConfig(level=getattr(logging, (level or settings.LOG_LEVEL).upper()))
