"""
Application settings
Read from environment variables and an optional .env file
"""
from typing import List, Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Lighthouse Resort"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Database
    DATABASE_URL: str = "sqlite:///./resort.db"

    # Session tokens
    SECRET_KEY: str = "resort-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ADMIN_SESSION_HOURS: int = 24
    STAFF_SESSION_HOURS: int = 8
    GUEST_SESSION_DAYS: int = 7
    COOKIE_SECURE: bool = False

    # Back-office account
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"

    # Demo mode: emails are logged, a built-in staff login exists
    DEMO_MODE: bool = False
    DEMO_STAFF_USERNAME: str = "demo"
    DEMO_STAFF_PASSWORD: str = "demo123"

    # Booking notification mail (Gmail SMTP)
    GMAIL_EMAIL: Optional[str] = None
    GMAIL_APP_PASSWORD: Optional[str] = None
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587

    # Attendance
    LATE_THRESHOLD: str = "08:00"

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
