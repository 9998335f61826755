"""ogx.engine: Orchestration layer: normalize → fetch → extract → aggregate."""

from __future__ import annotations

import asyncio
from typing import Optional

from ogx.aggregator import InspectionResult, TagMap
from ogx.config import InspectorConfig
from ogx.crawler.fetcher import Fetcher
from ogx.logger import logger
from ogx.parser.og_parser import TagExtractor
from ogx.utils import normalize_url

__all__ = ["Engine", "inspect_url"]


class Engine:
    """Фасад для CLI и тестов: один URL за вызов, без повторов и параллелизма."""

    def __init__(self, config: Optional[InspectorConfig] = None) -> None:
        self.config = config or InspectorConfig()

    def inspect(self, raw_url: str) -> InspectionResult:
        """Синхронный запуск конвейера; InvalidInput бросается до любого сетевого вызова."""
        url = normalize_url(raw_url)
        return asyncio.run(self._run(url))

    async def inspect_async(self, raw_url: str) -> InspectionResult:
        """То же, что :meth:`inspect`, для уже запущенного event loop."""
        return await self._run(normalize_url(raw_url))

    async def _run(self, url: str) -> InspectionResult:
        logger.debug("Inspecting %s", url)
        tags = TagMap()
        async with Fetcher(self.config) as fetcher:
            async with fetcher.stream(url) as page:
                extractor = TagExtractor(encoding=page.charset)
                async for chunk in page.body:
                    tags.extend(extractor.feed(chunk))
                tags.extend(extractor.close())
        tags.freeze()
        logger.info("Found %d OpenGraph keys (%d values) at %s", len(tags), tags.value_count(), url)
        return InspectionResult(url=url, tags=tags)


def inspect_url(raw_url: str, config: Optional[InspectorConfig] = None) -> InspectionResult:
    """Модульный ярлык для :meth:`Engine.inspect`."""
    return Engine(config).inspect(raw_url)
