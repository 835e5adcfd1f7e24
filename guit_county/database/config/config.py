"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed application configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Missing required fields raise a validation error at import time.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from guit_county.database.config.config import settings

# Example
driver = settings.DB_DRIVER_NAME
upload_dir = settings.UPLOAD_DIR

Security
--------
- Never commit secrets or the `.env` file to source control.
- Change `ADMIN_PASSWORD` before exposing the back office.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_DRIVER_NAME: str = Field(..., description="SQLAlchemy driver name (e.g., `postgresql+psycopg2`, `sqlite`).")
    DB_DATABASE_NAME: str = Field(..., description="Name of the database (file path for SQLite).")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password credential.")
    DB_HOST: Optional[str] = Field(None, description="Hostname or IP address of the database server.")
    DB_PORT: Optional[int] = Field(None, description="Port of the database server.")
    SECRET_KEY: str = Field(..., description="Secret key used to sign session tokens.")
    ALGORITHM: str = Field("HS256", description="JWT signing algorithm.")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(480, description="Duration (in minutes) before session tokens expire.")
    FRONTEND_URL: str = Field("*", description="Allowed CORS origin of the public site / admin panel.")
    UPLOAD_DIR: str = Field("uploads", description="Directory where uploaded media is stored and served from `/uploads`.")
    MAX_UPLOAD_MB: int = Field(50, description="Maximum accepted upload size in megabytes.")
    SITE_DIR: Optional[str] = Field(None, description="Directory of the built static site; served with an index.html catch-all when set.")
    ADMIN_USERNAME: str = Field("admin", description="Username of the administrator seeded on first startup.")
    ADMIN_EMAIL: str = Field("admin@guitcounty.gov", description="Email of the seeded administrator.")
    ADMIN_PASSWORD: str = Field("admin123", description="Initial password of the seeded administrator.")

# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object that contains the contents of the .env file"""
