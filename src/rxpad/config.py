"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CLINIC_NAME = (
    "თბილისის სახელმწიფო სამედიცინო უნივერსიტეტი და ინგოროყვას მაღალი სამედიცინო "
    "ტექნოლოგიების საუნივერსიტეტო კლინიკა"
)

DEFAULT_DOCTORS = [
    "ნინო კიკვაძე",
    "ანა დალაქიშვილი",
    "ეკლა მაისურაძე",
    "ურად მიგინეიშვილი",
    "კეთევან ზედელაშვილი",
    "ტერეზა ოსადჩუკე",
    "ეკატერინე მიქელაძე",
]

DEFAULT_CONTENT = "<p><strong>დანიშნულება:</strong></p><p></p>"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="RXPAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage
    storage_backend: Literal["file", "memory"] = Field(
        default="file",
        description="file: JSON file at storage_path; memory: lost on exit",
    )
    storage_path: Path = Field(
        default=Path("~/.rxpad/storage.json"),
        description="JSON file backing the local key/value store",
    )
    storage_quota_bytes: int | None = Field(
        default=5 * 1024 * 1024,
        description="Maximum stored bytes; None disables the cap",
    )
    templates_key: str = Field(default="mpg_templates_v1", description="Templates storage key")
    signatures_key: str = Field(default="mpg_signatures_v1", description="Signatures storage key")
    logo_key: str = Field(default="mpg_logo_v1", description="Logo storage key")
    max_upload_bytes: int = Field(default=2 * 1024 * 1024, description="Largest accepted image")

    # Output
    export_dir: Path = Field(default=Path("~/.rxpad/exports"), description="Export directory")
    export_filename: str = Field(default="mpg_templates.json", description="Export file name")
    print_dir: Path = Field(default=Path("~/.rxpad/print"), description="Printable sheet directory")

    # Document
    clinic_name: str = Field(default=DEFAULT_CLINIC_NAME, description="Clinic name on the sheet")
    doctors: list[str] = Field(default_factory=lambda: list(DEFAULT_DOCTORS), description="Roster")
    default_content: str = Field(default=DEFAULT_CONTENT, description="Content of a new draft")

    # Application
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    cors_origins: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        description="Comma-separated allowed origins",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    @field_validator("doctors")
    @classmethod
    def _roster_not_empty(cls, v: list[str]) -> list[str]:
        v = [d.strip() for d in v if d and d.strip()]
        if not v:
            raise ValueError("doctors must list at least one doctor")
        if len(set(v)) != len(v):
            raise ValueError("doctors must be unique")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
