import os
import tempfile
import unittest
from pathlib import Path

from store_config.config.env import read_consul_settings, read_nacos_settings
from store_config.errors import StoreConfigurationError
from store_config.loader import ConfigLoader
from store_config.selector import get_loader, select_backend
from store_config.stores import ConsulStore, LocalFileStore, NacosConfigClient, NacosStore

CONSUL_ENV = {"CONSUL_HOST": "consul.local"}
NACOS_ENV = {"NACOS_ENDPOINT": "http://nacos.local"}


class SelectBackendTests(unittest.TestCase):
    def test_consul_mode(self) -> None:
        self.assertIsInstance(select_backend("consul", env=CONSUL_ENV), ConsulStore)

    def test_nacos_mode(self) -> None:
        self.assertIsInstance(select_backend("nacos", env=NACOS_ENV), NacosStore)

    def test_other_modes_use_local_files(self) -> None:
        self.assertIsInstance(select_backend("anything-else", env={}), LocalFileStore)
        self.assertIsInstance(select_backend(None, env={}), LocalFileStore)
        self.assertIsInstance(select_backend("Consul", env={}), LocalFileStore)

    def test_local_files_ignore_remote_settings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cwd = os.getcwd()
            os.chdir(tmp)
            try:
                store = select_backend(None, env={})
            finally:
                os.chdir(cwd)
        self.assertEqual(store.root, Path(tmp) / "config")

    def test_missing_consul_host_fails_fast(self) -> None:
        with self.assertRaises(StoreConfigurationError):
            select_backend("consul", env={})

    def test_missing_nacos_endpoint_fails_fast(self) -> None:
        with self.assertRaises(StoreConfigurationError):
            select_backend("nacos", env={"NACOS_NAMESPACE": "prod"})

    def test_nacos_group_is_bound_to_the_store(self) -> None:
        store = select_backend("nacos", env={**NACOS_ENV, "NACOS_GROUP": "payments"})
        self.assertEqual(store.group, "payments")

    def test_get_loader_wraps_backend(self) -> None:
        loader = get_loader("consul", env=CONSUL_ENV)
        self.assertIsInstance(loader, ConfigLoader)
        self.assertIsInstance(loader.store, ConsulStore)


class ConsulSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = read_consul_settings(CONSUL_ENV)
        self.assertEqual(settings.port, 80)
        self.assertFalse(settings.secure)
        self.assertIsNone(settings.token)
        self.assertEqual(settings.base_url, "http://consul.local:80")

    def test_secure_flag_selects_443(self) -> None:
        settings = read_consul_settings({**CONSUL_ENV, "SSL": "TRUE", "CONSUL_TOKEN": "t0k"})
        self.assertTrue(settings.secure)
        self.assertEqual(settings.port, 443)
        self.assertEqual(settings.token, "t0k")
        self.assertEqual(settings.base_url, "https://consul.local:443")

    def test_explicit_port_wins(self) -> None:
        settings = read_consul_settings({**CONSUL_ENV, "SSL": "true", "CONSUL_PORT": "8500"})
        self.assertEqual(settings.port, 8500)

    def test_non_numeric_port_is_rejected(self) -> None:
        with self.assertRaises(StoreConfigurationError):
            read_consul_settings({**CONSUL_ENV, "CONSUL_PORT": "eighty"})

    def test_out_of_range_port_is_rejected(self) -> None:
        with self.assertRaises(StoreConfigurationError):
            read_consul_settings({**CONSUL_ENV, "CONSUL_PORT": "70000"})


class NacosSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = read_nacos_settings(NACOS_ENV)
        self.assertEqual(settings.group, "default")
        self.assertIsNone(settings.port)
        self.assertIsNone(settings.namespace)
        self.assertEqual(NacosConfigClient(settings).server_url, "http://nacos.local:80/nacos")

    def test_https_endpoint_selects_443(self) -> None:
        settings = read_nacos_settings({"NACOS_ENDPOINT": "HTTPS://nacos.local", "NACOS_NAMESPACE": "prod"})
        self.assertEqual(NacosConfigClient(settings).server_url, "https://nacos.local:443/nacos")
        self.assertEqual(settings.namespace, "prod")

    def test_explicit_port_wins(self) -> None:
        settings = read_nacos_settings({**NACOS_ENV, "NACOS_PORT": "8848"})
        self.assertEqual(settings.port, 8848)

    def test_explicit_port_wins_over_endpoint_port(self) -> None:
        settings = read_nacos_settings({"NACOS_ENDPOINT": "http://nacos.local:8848", "NACOS_PORT": "9000"})
        self.assertEqual(NacosConfigClient(settings).server_url, "http://nacos.local:9000/nacos")

    def test_endpoint_port_used_without_explicit_port(self) -> None:
        settings = read_nacos_settings({"NACOS_ENDPOINT": "http://nacos.local:8848"})
        self.assertEqual(NacosConfigClient(settings).server_url, "http://nacos.local:8848/nacos")

    def test_empty_group_is_kept(self) -> None:
        settings = read_nacos_settings({**NACOS_ENV, "NACOS_GROUP": ""})
        self.assertEqual(settings.group, "")


if __name__ == "__main__":
    unittest.main()
