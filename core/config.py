"""
Pydantic models for Document Library configuration.

This module contains the Pydantic models that describe how the library
behaves at runtime: logging, event delivery, title search and duplicate
handling.
"""

from typing import Optional
from enum import Enum
import logging

from pydantic import BaseModel, Field, field_validator, ConfigDict

logger = logging.getLogger(__name__)


class ApplicationEnvironment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format string"
    )
    file_path: Optional[str] = Field(default=None, description="Path to log file")
    console: bool = Field(default=True, description="Whether to log to console")
    colored: bool = Field(default=False, description="Colorize console log levels")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class EventConfig(BaseModel):
    """Configuration for change notification delivery."""
    isolate_listener_errors: bool = Field(
        default=False,
        description=(
            "Log and skip listeners that raise while handling an event "
            "instead of aborting delivery to the remaining listeners"
        )
    )


class SearchConfig(BaseModel):
    """Configuration for title search."""
    case_sensitive: bool = Field(
        default=True,
        description="Match title patterns case-sensitively"
    )


class LibraryConfig(BaseModel):
    """Main configuration for the document library."""
    name: str = Field(
        default="document-library",
        description="Library name, used in log messages"
    )
    environment: ApplicationEnvironment = Field(
        default=ApplicationEnvironment.DEVELOPMENT,
        description="Application environment"
    )
    allow_duplicates: bool = Field(
        default=True,
        description="Allow the same document to be added more than once"
    )

    # --- Component configs ---
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration"
    )
    events: EventConfig = Field(
        default_factory=EventConfig,
        description="Event delivery configuration"
    )
    search: SearchConfig = Field(
        default_factory=SearchConfig,
        description="Title search configuration"
    )

    model_config = ConfigDict(
        validate_default=True
    )
