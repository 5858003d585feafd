from __future__ import annotations

import re
from typing import Mapping, Pattern, Union

from store_config.interfaces import TextTransform

PLACEHOLDER_PATTERN = r"#\{([\w.-]+)\}"


def regex_transform(pattern: Union[str, Pattern[str]], replacement: str) -> TextTransform:
    """Replace every match of `pattern` with `replacement` (same semantics as `re.sub`)."""
    compiled = re.compile(pattern)

    def transform(text: str) -> str:
        return compiled.sub(replacement, text)

    return transform


def placeholder_transform(values: Mapping[str, str], pattern: str = PLACEHOLDER_PATTERN) -> TextTransform:
    """
    Substitute `#{name}` placeholders with `values[name]`.

    Placeholders without a value are left as they are.
    """
    compiled = re.compile(pattern)
    lookup = dict(values)

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(lookup[name]) if name in lookup else match.group(0)

    def transform(text: str) -> str:
        return compiled.sub(replace, text)

    return transform
