"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    CONSOLE = "console"
    FILE = "file"
    BOTH = "both"
    NONE = "none"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(
        LogDestination.CONSOLE, description="Where log records go (console is stderr)"
    )
    file_path: str = Field("logs/pattern_demos.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum log file size before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, value):
        """Accept destinations in any case."""
        if isinstance(value, str):
            return value.lower()
        return value
