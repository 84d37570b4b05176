"""
NoteKeeper configuration.

Every field can be set from the environment (case-insensitive) or a .env file.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field(default="NoteKeeper API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Environment - "production" turns on secure cookies
    environment: str = Field(default="development", description="Environment name")

    # uvicorn
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=10000)
    reload: bool = Field(default=False)

    # Record stores
    data_dir: str = Field(default=".", description="Directory holding the JSON stores")
    notes_file: str = Field(default="notes.json")
    users_file: str = Field(default="users.json")

    # Static client and uploads
    static_dir: str = Field(default="public", description="Client files served at /")
    upload_dir: str = Field(default="public/uploads", description="Where profile images land")
    upload_url_prefix: str = Field(default="/uploads")

    # Session tokens
    secret_key: str = Field(
        default="your-secret-key-change-in-production", description="Session signing key"
    )
    algorithm: str = Field(default="HS256", description="Session token algorithm")
    session_cookie_name: str = Field(default="authToken")
    session_expire_hours: int = Field(default=24, description="Session lifetime in hours")

    # Administrators
    admin_usernames: list[str] = Field(
        default=["admin"], description="Usernames allowed to manage users"
    )
    initial_admin_password: Optional[str] = Field(
        default=None, description="Creates the first admin account on startup when set"
    )

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], description="CORS allowed origins"
    )
    # Cookies only travel cross-origin with credentials allowed
    cors_allow_credentials: bool = Field(default=True)

    # Profile images
    max_file_size_mb: int = Field(default=10, description="Largest accepted profile image")
    allowed_file_extensions: list[str] = Field(
        default=[".jpg", ".jpeg", ".png", ".gif", ".webp"],
        description="Allowed profile image extensions",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(
        default="json", description="Console output: JSON lines or colored text"
    )
    log_dir: str = Field(default="logs", description="Log file directory, empty disables files")

    @property
    def notes_path(self) -> Path:
        return Path(self.data_dir) / self.notes_file

    @property
    def users_path(self) -> Path:
        return Path(self.data_dir) / self.users_file

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_expire_hours * 3600

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


settings = Settings()


def get_settings() -> Settings:
    """Settings dependency; tests swap it through ``app.dependency_overrides``."""
    return settings
