from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from store_config.config.models import NacosSettings
from store_config.errors import DocumentNotFoundError, StoreConfigurationError
from store_config.interfaces import ConfigCenterClient
from store_config.stores._http import get_text

logger = logging.getLogger(__name__)


def _server_url(settings: NacosSettings) -> str:
    endpoint = settings.endpoint if "://" in settings.endpoint else f"http://{settings.endpoint}"
    parts = urlsplit(endpoint)
    if not parts.hostname:
        raise StoreConfigurationError(f"Invalid Nacos endpoint: {settings.endpoint}")
    try:
        url_port = parts.port
    except ValueError as e:
        raise StoreConfigurationError(f"Invalid Nacos endpoint port: {settings.endpoint}") from e
    # NACOS_PORT wins over the endpoint URL port, which wins over the scheme default.
    port = settings.port or url_port or (443 if parts.scheme.lower() == "https" else 80)
    host = parts.netloc.rsplit(":", 1)[0] if url_port is not None else parts.netloc
    netloc = f"{host}:{port}"
    context_path = "/" + settings.context_path.strip("/") if settings.context_path.strip("/") else ""
    return urlunsplit((parts.scheme, netloc, parts.path.rstrip("/") + context_path, "", ""))


class NacosConfigClient:
    """Minimal client for the Nacos open API (`GET <context>/v1/cs/configs`)."""

    def __init__(self, settings: NacosSettings) -> None:
        self._settings = settings
        self._server_url = _server_url(settings)

    @property
    def server_url(self) -> str:
        return self._server_url

    async def get_config(self, data_id: str, group: str) -> Optional[str]:
        params = {"dataId": data_id, "group": group}
        if self._settings.namespace:
            params["tenant"] = self._settings.namespace
        return await get_text(
            f"{self._server_url}/v1/cs/configs",
            name=data_id,
            params=params,
            timeout_seconds=self._settings.timeout_seconds,
            max_retries=self._settings.max_retries,
        )


class NacosStore:
    def __init__(self, client: ConfigCenterClient, *, group: str = "default") -> None:
        self._client = client
        self._group = group

    @property
    def group(self) -> str:
        return self._group

    async def load_file(self, name: str) -> str:
        content = await self._client.get_config(name, self._group)
        if content is None:
            logger.warning("Nacos config not found. data_id=%s group=%s", name, self._group)
            raise DocumentNotFoundError(f"Nacos config not found: {name} (group={self._group})", name=name)
        return content
