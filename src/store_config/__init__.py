"""Load YAML configuration from local files, Consul KV or Nacos, resolving `includes` directives."""

from store_config.composite import AppAndLoggerConfig, load_app_and_logger_config
from store_config.errors import (
    ConfigLoaderError,
    DocumentNotFoundError,
    IncludeDirectiveError,
    MergeError,
    ParseError,
    StoreConfigurationError,
    StoreError,
    StoreUnavailableError,
)
from store_config.includes import IncludeDirective
from store_config.interfaces import ConfigDocument, StoreBackend, TextTransform
from store_config.loader import ConfigLoader
from store_config.merge import deep_merge
from store_config.selector import get_loader, select_backend

__all__ = [
    "AppAndLoggerConfig",
    "ConfigDocument",
    "ConfigLoader",
    "ConfigLoaderError",
    "DocumentNotFoundError",
    "IncludeDirective",
    "IncludeDirectiveError",
    "MergeError",
    "ParseError",
    "StoreBackend",
    "StoreConfigurationError",
    "StoreError",
    "StoreUnavailableError",
    "TextTransform",
    "deep_merge",
    "get_loader",
    "load_app_and_logger_config",
    "select_backend",
]
