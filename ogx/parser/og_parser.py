"""Streaming OpenGraph extraction for ogx.

The body is tokenized in a single forward pass with :class:`html.parser.HTMLParser`
(the tokenizer behind BeautifulSoup's ``"html.parser"`` builder), fed chunk by chunk.
No tree is built; only the attributes of the current ``<meta>`` element are held
until its ``>`` is reached.

Rules for a ``<meta>`` element:

* the key is the first non-empty ``property`` or ``name`` attribute, trimmed and
  lower-cased; a later one is ignored;
* the value is the ``content`` attribute, entity-decoded and trimmed;
* a pair is emitted only when the key starts with ``og:`` and the value is non-empty.

A tokenizer failure ends emission; pairs found so far are kept.
"""
from __future__ import annotations

import codecs
import html
from collections.abc import Iterable, Iterator, Sequence
from html.parser import HTMLParser
from typing import NamedTuple, Optional

from bs4.dammit import EncodingDetector

from ogx.logger import logger

__all__: Sequence[str] = ("OG_PREFIX", "TagPair", "TagExtractor", "extract_tags")

OG_PREFIX = "og:"
KEY_ATTRS = frozenset({"property", "name"})
# Everything up to the matching end tag is text, even if it looks like a <meta>.
RAW_TEXT_ELEMENTS = frozenset(
    {"iframe", "noembed", "noframes", "noscript", "script", "style", "textarea", "title", "xmp"}
)
DEFAULT_ENCODING = "utf-8"

# Where a <meta charset> declaration is looked for when the response has none.
_SNIFF_BYTES = 1024


class TagPair(NamedTuple):
    key: str
    value: str


def meta_pair(attrs: Iterable[tuple[str, Optional[str]]]) -> TagPair | None:
    """Build a :class:`TagPair` from ``<meta>`` attributes in document order, or None."""
    key = ""
    content = ""
    for name, value in attrs:
        name = name.lower()
        if name in KEY_ATTRS:
            if not key:
                key = (value or "").strip().lower()
        elif name == "content":
            content = html.unescape(value or "").strip()

    if not key or not content or not key.startswith(OG_PREFIX):
        return None
    return TagPair(key, content)


class _MetaTokenizer(HTMLParser):
    """Collects pairs from ``<meta>`` start and self-closing tags."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.pairs: list[TagPair] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        tag = tag.lower()
        if tag in RAW_TEXT_ELEMENTS:
            self.set_cdata_mode(tag)
            return
        if tag != "meta":
            return
        pair = meta_pair(attrs)
        if pair is not None:
            self.pairs.append(pair)

    # <meta ... /> goes through handle_startendtag, which calls handle_starttag.


class TagExtractor:
    """Incremental extractor: ``feed()`` raw byte chunks, then ``close()``.

    Each call returns the pairs completed by that chunk, in document order.
    """

    def __init__(self, encoding: str | None = None) -> None:
        self._encoding = encoding
        self._decoder: codecs.IncrementalDecoder | None = None
        self._codec: str | None = None
        self._pending = bytearray()
        self._tokenizer = _MetaTokenizer()
        self.failed = False
        self.closed = False

    @property
    def encoding(self) -> str | None:
        """Codec in use, known once enough bytes were seen to pick one."""
        return self._codec

    def feed(self, chunk: bytes) -> list[TagPair]:
        if self.failed or self.closed:
            return []
        if self._decoder is None:
            self._pending.extend(chunk)
            if len(self._pending) < _SNIFF_BYTES:
                return []
            chunk = bytes(self._pending)
            self._pending.clear()
            self._decoder = self._make_decoder(chunk)
        return self._tokenize(self._decoder.decode(chunk))

    def close(self) -> list[TagPair]:
        """Flush buffered input; no pairs are produced after this."""
        if self.closed:
            return []
        pairs: list[TagPair] = []
        if not self.failed:
            if self._decoder is None:
                data = bytes(self._pending)
                self._pending.clear()
                self._decoder = self._make_decoder(data)
                pairs.extend(self._tokenize(self._decoder.decode(data)))
            pairs.extend(self._tokenize(self._decoder.decode(b"", final=True), final=True))
        self.closed = True
        return pairs

    def _make_decoder(self, head: bytes) -> codecs.IncrementalDecoder:
        encoding = self._encoding or EncodingDetector.find_declared_encoding(head, is_html=True)
        try:
            info = codecs.lookup(encoding or DEFAULT_ENCODING)
        except LookupError:
            logger.debug("Unknown charset %r, falling back to %s", encoding, DEFAULT_ENCODING)
            info = codecs.lookup(DEFAULT_ENCODING)
        logger.debug("Decoding body as %s", info.name)
        self._codec = info.name
        return info.incrementaldecoder(errors="replace")

    def _tokenize(self, text: str, final: bool = False) -> list[TagPair]:
        if self.failed:
            return []
        try:
            if text:
                self._tokenizer.feed(text)
            if final:
                self._tokenizer.close()
        except Exception as exc:
            logger.warning("HTML tokenizer stopped: %s", exc)
            self.failed = True
        pairs, self._tokenizer.pairs = self._tokenizer.pairs, []
        return pairs


def extract_tags(chunks: Iterable[bytes], encoding: str | None = None) -> Iterator[TagPair]:
    """Lazily yield pairs from an iterable of byte chunks (e.g. a file read in blocks)."""
    extractor = TagExtractor(encoding)
    for chunk in chunks:
        yield from extractor.feed(chunk)
    yield from extractor.close()
