from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def _default_config_root() -> str:
    return str(Path.cwd() / "config")


class LocalFileSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    root: str = Field(default_factory=_default_config_root)


class ConsulSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = Field(min_length=1)
    port: int = Field(gt=0, lt=65536)
    secure: bool = False
    token: Optional[str] = None

    timeout_seconds: float = 10
    max_retries: int = Field(default=1, ge=1)

    @property
    def base_url(self) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.host}:{self.port}"


class NacosSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    endpoint: str = Field(min_length=1)
    # Explicit NACOS_PORT; when unset the endpoint URL port, then 443/80 by scheme, is used.
    port: Optional[int] = Field(default=None, gt=0, lt=65536)
    namespace: Optional[str] = None
    group: str = "default"
    context_path: str = "/nacos"

    timeout_seconds: float = 10
    max_retries: int = Field(default=1, ge=1)


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    This maps cleanly to Python's standard library TimedRotatingFileHandler behavior.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = "logs/store-config.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: Optional[FileLoggingSettings] = None
