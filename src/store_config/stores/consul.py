from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from store_config.config.models import ConsulSettings
from store_config.errors import DocumentNotFoundError
from store_config.interfaces import KVClient
from store_config.stores._http import get_text

logger = logging.getLogger(__name__)


class ConsulKVClient:
    """Minimal client for the Consul HTTP KV API (`GET /v1/kv/<key>?raw`)."""

    def __init__(self, settings: ConsulSettings) -> None:
        self._settings = settings

    async def get(self, key: str) -> Optional[str]:
        url = f"{self._settings.base_url}/v1/kv/{quote(key.lstrip('/'), safe='/')}"
        headers = {"X-Consul-Token": self._settings.token} if self._settings.token else {}
        return await get_text(
            url,
            name=key,
            params={"raw": ""},
            headers=headers,
            timeout_seconds=self._settings.timeout_seconds,
            max_retries=self._settings.max_retries,
        )


class ConsulStore:
    def __init__(self, client: KVClient) -> None:
        self._client = client

    async def load_file(self, name: str) -> str:
        value = await self._client.get(name)
        if value is None:
            logger.warning("Consul key not found. key=%s", name)
            raise DocumentNotFoundError(f"Consul key not found: {name}", name=name)
        return value
