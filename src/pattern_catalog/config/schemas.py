"""Application configuration schema."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"
    NONE = "none"


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


class LogFileConfig(BaseModel):
    """Rotating log file settings."""
    path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Rotate after this many MB")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: LogLevel = LogLevel.WARNING
    destination: LogDestination = LogDestination.STDOUT
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


class OutputConfig(BaseModel):
    """Demo and CLI output configuration."""
    format: OutputFormat = OutputFormat.TEXT
    echo: bool = Field(True, description="Echo demo output while it runs")
    include_source: bool = Field(True, description="Include code listings in write-ups")


class AppConfig(BaseModel):
    """Application configuration."""
    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    export_dir: Optional[str] = Field(None, description="Default markdown export directory")
