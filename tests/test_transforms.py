import unittest

from store_config.transforms import placeholder_transform, regex_transform


class TransformTests(unittest.TestCase):
    def test_regex_transform_replaces_every_match(self) -> None:
        transform = regex_transform(r"#\{service-name\}", "my-service")
        self.assertEqual(
            transform("name: #{service-name}\npath: /logs/#{service-name}.log\n"),
            "name: my-service\npath: /logs/my-service.log\n",
        )

    def test_placeholder_transform_substitutes_known_names(self) -> None:
        transform = placeholder_transform({"service-name": "orders", "env": "prod"})
        self.assertEqual(transform("#{service-name}-#{env}"), "orders-prod")

    def test_placeholder_transform_keeps_unknown_names(self) -> None:
        transform = placeholder_transform({"env": "prod"})
        self.assertEqual(transform("#{region}/#{env}"), "#{region}/prod")


if __name__ == "__main__":
    unittest.main()
