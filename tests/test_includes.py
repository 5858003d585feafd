import unittest

from store_config.errors import IncludeDirectiveError, ParseError
from store_config.includes import IncludeDirective, parse_includes


class ParseIncludesTests(unittest.TestCase):
    def test_single_directive_is_wrapped(self) -> None:
        directives = parse_includes({"file": "x.yaml", "key": "b", "params": {"c": 2}}, document="app.yaml")
        self.assertEqual(directives, [IncludeDirective(file="x.yaml", key="b", params={"c": 2})])

    def test_sequence_keeps_declaration_order(self) -> None:
        directives = parse_includes(
            [{"file": "one.yaml", "key": "one"}, {"file": "two.yaml", "key": "two"}],
            document="app.yaml",
        )
        self.assertEqual([d.key for d in directives], ["one", "two"])
        self.assertEqual(directives[0].params, {})

    def test_none_yields_no_directives(self) -> None:
        self.assertEqual(parse_includes(None, document="app.yaml"), [])

    def test_missing_key_is_rejected(self) -> None:
        with self.assertRaises(IncludeDirectiveError) as ctx:
            parse_includes({"file": "x.yaml"}, document="app.yaml")
        self.assertEqual(ctx.exception.name, "app.yaml")
        self.assertIsInstance(ctx.exception, ParseError)

    def test_non_mapping_entry_is_rejected(self) -> None:
        with self.assertRaises(IncludeDirectiveError):
            parse_includes(["x.yaml"], document="app.yaml")

    def test_non_mapping_params_are_rejected(self) -> None:
        with self.assertRaises(IncludeDirectiveError):
            parse_includes({"file": "x.yaml", "key": "b", "params": [1, 2]}, document="app.yaml")


if __name__ == "__main__":
    unittest.main()
