from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Optional

import aiohttp

from store_config.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

_RETRYABLE_HTTP_ERRORS: tuple[type[BaseException], ...] = (
    aiohttp.ClientConnectorError,
    aiohttp.ClientOSError,
    aiohttp.ServerDisconnectedError,
    asyncio.TimeoutError,
    ConnectionResetError,
)


async def _get_once(
    session: aiohttp.ClientSession,
    url: str,
    *,
    params: Mapping[str, str],
    headers: Mapping[str, str],
    name: str,
) -> Optional[str]:
    async with session.get(url, params=params, headers=headers) as response:
        if response.status == 404:
            return None
        if response.status != 200:
            body = (await response.text(errors="replace"))[:200]
            raise StoreUnavailableError(
                f"Request failed with status {response.status}. url={url} body={body!r}",
                name=name,
            )
        payload = await response.read()
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StoreUnavailableError(f"Response is not valid UTF-8. url={url}", name=name) from exc


async def get_text(
    url: str,
    *,
    name: str,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout_seconds: float,
    max_retries: int,
) -> Optional[str]:
    """
    GET a text resource. Returns None on 404.

    Connection-level failures are retried with exponential backoff; every other failure
    surfaces as StoreUnavailableError.
    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    last_error: BaseException | None = None
    async with aiohttp.ClientSession(timeout=timeout) as session:
        for attempt in range(1, max_retries + 1):
            try:
                return await _get_once(session, url, params=params or {}, headers=headers or {}, name=name)
            except _RETRYABLE_HTTP_ERRORS as exc:
                last_error = exc
                if attempt >= max_retries:
                    break
                delay_seconds = 0.5 * (2 ** (attempt - 1))
                logger.warning(
                    "Retrying config request. attempt=%s/%s delay_seconds=%s url=%s error=%s",
                    attempt,
                    max_retries,
                    delay_seconds,
                    url,
                    type(exc).__name__,
                )
                await asyncio.sleep(delay_seconds)
            except aiohttp.ClientError as exc:
                logger.warning("Config request failed. url=%s error=%s", url, exc)
                raise StoreUnavailableError(f"Request failed. url={url}", name=name) from exc

    raise StoreUnavailableError(
        f"Request failed after retries. url={url} error={type(last_error).__name__ if last_error else 'unknown'}",
        name=name,
    ) from last_error
