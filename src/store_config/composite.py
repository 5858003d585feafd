from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Mapping, Optional

from store_config.interfaces import ConfigDocument, TextTransform
from store_config.loader import ConfigLoader
from store_config.selector import select_backend


@dataclass(frozen=True, slots=True)
class AppAndLoggerConfig:
    app_conf: ConfigDocument
    logger_conf: ConfigDocument


async def load_app_and_logger_config(
    mode: Optional[str],
    app_file: str,
    logger_file: str,
    logger_transform: Optional[TextTransform] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> AppAndLoggerConfig:
    """Load the app and logger documents through one backend; only the logger document is transformed."""
    loader = ConfigLoader(select_backend(mode, env))
    app_conf, logger_conf = await asyncio.gather(
        loader.load(app_file),
        loader.load(logger_file, logger_transform),
    )
    return AppAndLoggerConfig(app_conf=app_conf, logger_conf=logger_conf)
