from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol

ConfigDocument = Dict[str, Any]
TextTransform = Callable[[str], str]


class StoreBackend(Protocol):
    """
    A pluggable source of raw configuration text, keyed by name.

    Implementations raise DocumentNotFoundError when the name has no content and
    StoreUnavailableError for any other failure. They must be safe to share between
    concurrent loads.
    """

    async def load_file(self, name: str) -> str:
        ...


class KVClient(Protocol):
    async def get(self, key: str) -> Optional[str]:
        """Return the raw value stored under key, or None when the key is absent."""


class ConfigCenterClient(Protocol):
    async def get_config(self, data_id: str, group: str) -> Optional[str]:
        """Return the content of a configuration entry, or None when it does not exist."""
