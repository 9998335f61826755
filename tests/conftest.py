# File: tests/conftest.py
import asyncio
import html
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from ogx.aggregator import InspectionResult, TagMap
from ogx.config import InspectorConfig

#: where the "large" page hides a tag past the default body cap
LARGE_PADDING: int = 2 << 20

PAGE_HTML = """<!doctype html>
<html>
<head>
  <title>Example</title>
  <meta property="og:title" content="A">
  <meta name="description" content="plain description">
  <meta property="og:title" content="B">
  <meta name="og:description" content="Tom &amp; Jerry" />
  <meta property="og:image">
</head>
<body><p>hello</p></body>
</html>
"""


async def _serve_app(app: web.Application) -> AsyncIterator[str]:
    """Start *app* on a free port, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    port = runner.addresses[0][1]
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def og_server() -> AsyncIterator[str]:
    """Local server with one route per scenario the pipeline has to handle."""
    app = web.Application()

    async def handle_root(_):
        return web.Response(text=PAGE_HTML, content_type="text/html")

    async def handle_empty(_):
        return web.Response(text="<html><head><title>x</title></head></html>", content_type="text/html")

    async def handle_error(_):
        return web.Response(status=500, text="boom")

    async def handle_slow(_):
        await asyncio.sleep(2)
        return web.Response(text=PAGE_HTML, content_type="text/html")

    async def handle_large(_):
        body = (
            b'<html><head><meta property="og:title" content="Early"></head><body>'
            + b"x" * LARGE_PADDING
            + b'<meta property="og:late" content="Late"></body></html>'
        )
        return web.Response(body=body, content_type="text/html")

    async def handle_ua(request):
        ua = html.escape(request.headers.get("User-Agent", ""))
        return web.Response(text=f'<meta property="og:ua" content="{ua}">', content_type="text/html")

    async def handle_redirect(_):
        raise web.HTTPFound("/")

    async def handle_latin1(_):
        body = '<meta property="og:title" content="Café">'.encode("latin-1")
        return web.Response(body=body, content_type="text/html", charset="iso-8859-1")

    async def handle_broken_tail(_):
        return web.Response(
            text='<meta property="og:title" content="Kept"><div <<<"><!-- never closed <script>',
            content_type="text/html",
        )

    app.router.add_get("/", handle_root)
    app.router.add_get("/empty", handle_empty)
    app.router.add_get("/error", handle_error)
    app.router.add_get("/slow", handle_slow)
    app.router.add_get("/large", handle_large)
    app.router.add_get("/ua", handle_ua)
    app.router.add_get("/redirect", handle_redirect)
    app.router.add_get("/latin1", handle_latin1)
    app.router.add_get("/broken-tail", handle_broken_tail)

    async for url in _serve_app(app):
        yield url


@pytest.fixture()
def basic_config() -> InspectorConfig:
    """Short timeout so failing network tests finish quickly."""
    return InspectorConfig(timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def sample_result() -> InspectionResult:
    tags = TagMap()
    tags.add("og:title", "A")
    tags.add("og:title", "B")
    tags.add("og:description", "Tom & Jerry")
    return InspectionResult(url="https://example.com/", tags=tags.freeze())


@pytest.fixture()
def page_html() -> str:
    return PAGE_HTML
