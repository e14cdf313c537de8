"""Configuration management for deskfit using Pydantic Settings."""

import logging
import sys
from pathlib import Path
from typing import Literal

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

PROFILE_FILE = "profile.json"
PROGRESS_FILE = "progress_entries.json"
INSIGHT_CACHE_FILE = "insight_cache.json"
REPORT_FILE = "analysis_report.json"


class Settings(BaseSettings):
    """Main deskfit settings."""

    model_config = SettingsConfigDict(
        env_prefix="DESKFIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Path("~/.local/share/deskfit")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_json: bool = False

    def resolved_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir.expanduser()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def profile_path(self) -> Path:
        return self.resolved_data_dir() / PROFILE_FILE

    def progress_path(self) -> Path:
        return self.resolved_data_dir() / PROGRESS_FILE

    def insight_cache_path(self) -> Path:
        return self.resolved_data_dir() / INSIGHT_CACHE_FILE

    def report_path(self) -> Path:
        return self.resolved_data_dir() / REPORT_FILE


def get_settings() -> Settings:
    """Build settings from the environment."""
    return Settings()


_logging_configured = False


def configure_logging(settings: Settings) -> None:
    """Configure structlog once per process."""
    global _logging_configured
    if _logging_configured:
        return

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _logging_configured = True
