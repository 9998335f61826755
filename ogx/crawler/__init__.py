"""ogx.crawler: Ограниченная загрузка одной страницы."""

from .fetcher import Fetcher
from .models import FetchedPage

__all__ = ["Fetcher", "FetchedPage"]
