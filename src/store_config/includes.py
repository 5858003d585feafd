from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from store_config.errors import IncludeDirectiveError

INCLUDES_KEY = "includes"


@dataclass(frozen=True, slots=True)
class IncludeDirective:
    """
    A reference from one document to another.

    The included document is stored under `key` after `params` have been laid over it.
    """

    file: str
    key: str
    params: Mapping[str, Any] = field(default_factory=dict)


def _parse_directive(raw: Any, *, document: str, index: int) -> IncludeDirective:
    if not isinstance(raw, Mapping):
        raise IncludeDirectiveError(
            f"Include entry must be a mapping, got: {type(raw).__name__}. index={index}",
            name=document,
        )

    file = raw.get("file")
    key = raw.get("key")
    if not isinstance(file, str) or not file:
        raise IncludeDirectiveError(f"Include entry needs a non-empty string 'file'. index={index}", name=document)
    if not isinstance(key, str) or not key:
        raise IncludeDirectiveError(f"Include entry needs a non-empty string 'key'. index={index}", name=document)

    params = raw.get("params")
    if params is None:
        params = {}
    elif not isinstance(params, Mapping):
        raise IncludeDirectiveError(
            f"Include 'params' must be a mapping, got: {type(params).__name__}. index={index}",
            name=document,
        )
    return IncludeDirective(file=file, key=key, params=dict(params))


def parse_includes(raw: Any, *, document: str) -> list[IncludeDirective]:
    """Normalize the value of an `includes` field into an ordered list of directives."""
    if raw is None:
        return []
    entries = raw if isinstance(raw, list) else [raw]
    return [_parse_directive(entry, document=document, index=i) for i, entry in enumerate(entries)]
