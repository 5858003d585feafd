from __future__ import annotations

from typing import Any, FrozenSet, Mapping

from store_config.errors import MergeError


def deep_merge(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge two config documents into a new mapping, right-biased.

    - Sequence on the incoming side: base sequence (or nothing) followed by the incoming one.
    - Mapping on both sides: merged recursively.
    - Anything else: the incoming value replaces the base value.

    Keys present only in base are carried through. Neither input is mutated, but untouched
    nested values are shared with the inputs rather than copied.
    """
    return _merge(base, incoming, base_path=frozenset(), incoming_path=frozenset())


def _merge(
    base: Mapping[str, Any],
    incoming: Mapping[str, Any],
    *,
    base_path: FrozenSet[int],
    incoming_path: FrozenSet[int],
) -> dict[str, Any]:
    if id(base) in base_path or id(incoming) in incoming_path:
        raise MergeError("Cyclic mapping detected during deep merge.")
    base_path = base_path | {id(base)}
    incoming_path = incoming_path | {id(incoming)}

    result = dict(base)
    for key, value in incoming.items():
        current = base.get(key)
        if isinstance(value, list):
            prefix = current if isinstance(current, list) else []
            result[key] = [*prefix, *value]
        elif isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = _merge(current, value, base_path=base_path, incoming_path=incoming_path)
        else:
            result[key] = value
    return result
