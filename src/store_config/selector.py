from __future__ import annotations

import logging
from typing import Mapping, Optional

from store_config.config.env import read_consul_settings, read_nacos_settings
from store_config.interfaces import StoreBackend
from store_config.loader import ConfigLoader
from store_config.stores import ConsulKVClient, ConsulStore, LocalFileStore, NacosConfigClient, NacosStore

logger = logging.getLogger(__name__)


def select_backend(mode: Optional[str], env: Optional[Mapping[str, str]] = None) -> StoreBackend:
    """
    Build the store backend for `mode`: "nacos", "consul", or anything else for local files.

    Remote backends read their settings from `env` (default: the process environment) and
    raise StoreConfigurationError when required settings are missing or invalid.
    """
    if mode == "nacos":
        settings = read_nacos_settings(env)
        client = NacosConfigClient(settings)
        logger.info("Selected Nacos backend. server=%s group=%s", client.server_url, settings.group)
        return NacosStore(client, group=settings.group)
    if mode == "consul":
        settings = read_consul_settings(env)
        logger.info("Selected Consul backend. server=%s", settings.base_url)
        return ConsulStore(ConsulKVClient(settings))

    store = LocalFileStore()
    logger.info("Selected local file backend. root=%s", store.root)
    return store


def get_loader(mode: Optional[str], env: Optional[Mapping[str, str]] = None) -> ConfigLoader:
    return ConfigLoader(select_backend(mode, env))
