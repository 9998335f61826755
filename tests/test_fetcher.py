# Tests for the bounded fetcher, run against a local aiohttp server
from __future__ import annotations

import pytest

from ogx.config import InspectorConfig
from ogx.crawler.fetcher import Fetcher
from ogx.errors import HTTPStatusError, NetworkError


async def read_all(fetcher: Fetcher, url: str) -> tuple[int, str | None, bytes]:
    async with fetcher.stream(url) as page:
        body = b"".join([chunk async for chunk in page.body])
        return page.status, page.charset, body


@pytest.mark.asyncio()
async def test_stream_returns_body(og_server: str, basic_config: InspectorConfig, page_html: str):
    async with Fetcher(basic_config) as fetcher:
        status, charset, body = await read_all(fetcher, f"{og_server}/")
    assert status == 200
    assert charset == "utf-8"
    assert body == page_html.encode("utf-8")


@pytest.mark.asyncio()
async def test_sends_user_agent(og_server: str, basic_config: InspectorConfig):
    async with Fetcher(basic_config) as fetcher:
        _, _, body = await read_all(fetcher, f"{og_server}/ua")
    assert body == b'<meta property="og:ua" content="TestAgent/1.0">'


@pytest.mark.asyncio()
async def test_redirect_is_followed(og_server: str, basic_config: InspectorConfig):
    async with Fetcher(basic_config) as fetcher:
        async with fetcher.stream(f"{og_server}/redirect") as page:
            assert page.status == 200
            assert page.url == f"{og_server}/"


@pytest.mark.asyncio()
@pytest.mark.parametrize("path,status", [("/missing", 404), ("/error", 500)])
async def test_bad_status(og_server: str, basic_config: InspectorConfig, path: str, status: int):
    async with Fetcher(basic_config) as fetcher:
        with pytest.raises(HTTPStatusError) as excinfo:
            await read_all(fetcher, f"{og_server}{path}")
    assert excinfo.value.status == status
    assert str(excinfo.value).startswith(f"unexpected HTTP status: {status}")


@pytest.mark.asyncio()
async def test_timeout_is_network_error(og_server: str):
    config = InspectorConfig(timeout="300ms")
    async with Fetcher(config) as fetcher:
        with pytest.raises(NetworkError) as excinfo:
            await read_all(fetcher, f"{og_server}/slow")
    assert str(excinfo.value) == "request failed: timed out after 0.3s"


@pytest.mark.asyncio()
async def test_connection_refused_is_network_error(basic_config: InspectorConfig):
    async with Fetcher(basic_config) as fetcher:
        with pytest.raises(NetworkError) as excinfo:
            await read_all(fetcher, "http://127.0.0.1:1/")
    assert str(excinfo.value).startswith("request failed: ")


@pytest.mark.asyncio()
async def test_body_is_capped(og_server: str, page_html: str):
    config = InspectorConfig(max_body_bytes=100, chunk_size=32)
    async with Fetcher(config) as fetcher:
        _, _, body = await read_all(fetcher, f"{og_server}/")
    assert body == page_html.encode("utf-8")[:100]


@pytest.mark.asyncio()
async def test_default_cap_is_two_mib(og_server: str, basic_config: InspectorConfig):
    async with Fetcher(basic_config) as fetcher:
        _, _, body = await read_all(fetcher, f"{og_server}/large")
    assert len(body) == 2 << 20


def test_session_required(basic_config: InspectorConfig):
    fetcher = Fetcher(basic_config)
    with pytest.raises(RuntimeError):
        fetcher.session
