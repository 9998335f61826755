"""
Data models for the ogx fetcher.
"""
from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass


@dataclass(slots=True)
class FetchedPage:
    """Accepted response: final URL, status, declared charset and the capped body stream.

    ``body`` is read-once; it is only valid inside ``Fetcher.stream()``.
    """

    url: str
    status: int
    charset: str | None
    body: AsyncIterator[bytes]
