from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from loadenv.parser import DEFAULT_ENCODING, DEFAULT_PATH


class LoaderSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    default_path: str = DEFAULT_PATH
    encoding: str = DEFAULT_ENCODING
    # When False, keys already present in the environment are left untouched.
    override: bool = True


class FileRotationSettings(BaseModel):
    """Log files roll over at midnight; `backup_count` old files are kept."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = "logs/loadenv.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[FileLoggingSettings] = None
