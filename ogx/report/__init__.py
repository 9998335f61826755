"""ogx.report: Текстовый и JSON-отчёты, используемые CLI и тестами."""

from .json_report import format_json, render_json
from .text_report import NO_TAGS_NOTICE, format_text, render_text
from .writer import write_report

__all__ = [
    "NO_TAGS_NOTICE",
    "format_json",
    "format_text",
    "render_json",
    "render_text",
    "write_report",
]
