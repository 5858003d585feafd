from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import yaml

from store_config.errors import ParseError
from store_config.includes import INCLUDES_KEY, IncludeDirective, parse_includes
from store_config.interfaces import ConfigDocument, StoreBackend, TextTransform
from store_config.merge import deep_merge

logger = logging.getLogger(__name__)


def parse_document(text: str, *, name: str) -> ConfigDocument:
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"Malformed YAML document: {exc}", name=name) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(f"Top-level YAML must be a mapping, got: {type(data).__name__}", name=name)
    return data


class ConfigLoader:
    """
    Loads a config document from a store backend and resolves its `includes` directive.

    Only the `includes` of the document passed to `load` are expanded. Included documents
    are parsed as-is, so any `includes` they declare stay in the result as plain data.
    """

    def __init__(self, store: StoreBackend) -> None:
        self._store = store

    @property
    def store(self) -> StoreBackend:
        return self._store

    async def load(self, name: str, transform: Optional[TextTransform] = None) -> ConfigDocument:
        config = await self._load_document(name, transform)
        if INCLUDES_KEY not in config:
            logger.info("Loaded config document. name=%s includes=0", name)
            return config

        directives = parse_includes(config.pop(INCLUDES_KEY), document=name)
        included = await asyncio.gather(
            *[self._load_document(directive.file, transform) for directive in directives]
        )

        # Merge in declaration order; the loaded document stays the incoming side so its own keys win.
        for directive, document in zip(directives, included):
            config = deep_merge(_nest(directive, document), config)
            logger.debug("Merged include. name=%s file=%s key=%s", name, directive.file, directive.key)

        logger.info("Loaded config document. name=%s includes=%s", name, len(directives))
        return config

    async def _load_document(self, name: str, transform: Optional[TextTransform]) -> ConfigDocument:
        logger.debug("Fetching config document. name=%s store=%s", name, type(self._store).__name__)
        text = await self._store.load_file(name)
        if transform is not None:
            text = transform(text)
        return parse_document(text, name=name)


def _nest(directive: IncludeDirective, document: ConfigDocument) -> ConfigDocument:
    return {directive.key: {**document, **directive.params}}
