from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from store_config import load_app_and_logger_config
from store_config.config import LoggingSettings, load_dotenv_if_present
from store_config.logging import init_logging
from store_config.transforms import placeholder_transform


async def main() -> None:
    # Run from the examples/ directory so the local backend reads ./config.
    load_dotenv_if_present(Path(".env"))
    init_logging(LoggingSettings(level="DEBUG"))

    config = await load_app_and_logger_config(
        os.environ.get("CONFIG_MODE"),
        os.environ.get("CONFIG_FILE", "dev/app.yaml"),
        "dev/common-logger.yaml",
        placeholder_transform({"service-name": "my-service"}),
    )

    logger = logging.getLogger("smoke")
    logger.info("App config loaded. config=%s", config.app_conf)
    logger.info("Logger config loaded. config=%s", config.logger_conf)


if __name__ == "__main__":
    asyncio.run(main())
