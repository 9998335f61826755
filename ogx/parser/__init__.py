"""ogx.parser: Потоковое извлечение OpenGraph-тегов из HTML."""

from .og_parser import OG_PREFIX, TagExtractor, TagPair, extract_tags

__all__ = ["OG_PREFIX", "TagExtractor", "TagPair", "extract_tags"]
