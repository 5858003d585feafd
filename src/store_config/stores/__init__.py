"""Store backends: local files, Consul KV and Nacos."""

from store_config.stores.consul import ConsulKVClient, ConsulStore
from store_config.stores.local_file import LocalFileStore
from store_config.stores.nacos import NacosConfigClient, NacosStore

__all__ = ["ConsulKVClient", "ConsulStore", "LocalFileStore", "NacosConfigClient", "NacosStore"]
