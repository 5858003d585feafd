"""Settings models and environment readers for the store backends."""

from store_config.config.env import load_dotenv_if_present, read_consul_settings, read_nacos_settings
from store_config.config.models import (
    ConsulSettings,
    FileLoggingSettings,
    FileRotationSettings,
    LocalFileSettings,
    LoggingSettings,
    NacosSettings,
)

__all__ = [
    "ConsulSettings",
    "FileLoggingSettings",
    "FileRotationSettings",
    "LocalFileSettings",
    "LoggingSettings",
    "NacosSettings",
    "load_dotenv_if_present",
    "read_consul_settings",
    "read_nacos_settings",
]
