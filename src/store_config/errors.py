from __future__ import annotations

from typing import Optional


class ConfigLoaderError(Exception):
    """Base class for every error raised by store_config."""


class StoreError(ConfigLoaderError):
    """A store backend could not return the requested document."""

    def __init__(self, message: str, *, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.name = name


class DocumentNotFoundError(StoreError):
    pass


class StoreUnavailableError(StoreError):
    pass


class StoreConfigurationError(ConfigLoaderError):
    """A store backend could not be built from its settings."""


class ParseError(ConfigLoaderError):
    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(f"{message} name={name}")
        self.name = name


class IncludeDirectiveError(ParseError):
    pass


class MergeError(ConfigLoaderError):
    pass
