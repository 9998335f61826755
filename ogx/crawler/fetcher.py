"""
Fetcher module: one timed GET per run with a capped, streamed body.
"""
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import TracebackType
from typing import Optional

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout
from ogx.config import InspectorConfig
from ogx.crawler.models import FetchedPage
from ogx.errors import HTTPStatusError, NetworkError
from ogx.logger import logger


def _is_accepted(status: int) -> bool:
    return 200 <= status < 400


class Fetcher:
    """Issues a single GET with a fixed User-Agent and exposes at most ``max_body_bytes`` of the body."""

    def __init__(self, config: InspectorConfig) -> None:
        self.config = config
        self._session: Optional[ClientSession] = None

    async def __aenter__(self) -> Fetcher:
        self._session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> ClientSession:
        if self._session is None:
            raise RuntimeError("Fetcher must be used as an async context manager")
        return self._session

    @asynccontextmanager
    async def stream(self, url: str) -> AsyncIterator[FetchedPage]:
        """
        GET *url* and yield the accepted response.

        Raises NetworkError on transport failures and timeouts (including while the
        body is being read), HTTPStatusError when the status is outside [200, 400).
        The response is released on every exit path.
        """
        logger.debug("GET %s (timeout=%ss)", url, self.config.timeout)
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                logger.info("%s -> %s %s", url, resp.status, resp.reason or "")
                if not _is_accepted(resp.status):
                    raise HTTPStatusError(url, resp.status, resp.reason)
                yield FetchedPage(
                    url=str(resp.url),
                    status=resp.status,
                    charset=resp.charset,
                    body=self._capped_body(resp),
                )
        except asyncio.TimeoutError as exc:
            raise NetworkError(url, f"timed out after {self.config.timeout:g}s") from exc
        except ClientError as exc:
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc

    async def _capped_body(self, resp: ClientResponse) -> AsyncIterator[bytes]:
        """Yield body chunks; everything past ``max_body_bytes`` is dropped."""
        remaining = self.config.max_body_bytes
        async for chunk in resp.content.iter_chunked(self.config.chunk_size):
            if len(chunk) >= remaining:
                yield chunk[:remaining]
                logger.debug("Body capped at %d bytes", self.config.max_body_bytes)
                return
            remaining -= len(chunk)
            yield chunk
