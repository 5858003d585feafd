from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from store_config.config.models import LocalFileSettings
from store_config.errors import DocumentNotFoundError, StoreUnavailableError

logger = logging.getLogger(__name__)


class LocalFileStore:
    """Reads documents as UTF-8 files below a fixed root directory (default: `<cwd>/config`)."""

    def __init__(self, settings: Optional[LocalFileSettings] = None) -> None:
        settings = settings or LocalFileSettings()
        self._root = Path(settings.root)

    @property
    def root(self) -> Path:
        return self._root

    async def load_file(self, name: str) -> str:
        # Names are always relative to the root, even with a leading slash.
        path = self._root / name.lstrip("/")
        try:
            return await asyncio.to_thread(_read_text, path)
        except FileNotFoundError as e:
            logger.warning("Config file not found. path=%s", path)
            raise DocumentNotFoundError(f"Config file not found: {path}", name=name) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read config file. path=%s error=%s", path, e)
            raise StoreUnavailableError(f"Failed to read config file: {path}", name=name) from e


def _read_text(path: Path) -> str:
    return path.resolve().read_text(encoding="utf-8")
