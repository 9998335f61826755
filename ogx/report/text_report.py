# ogx/report/text_report.py

"""
Человекочитаемый отчёт: ``URL: <url>``, пустая строка, затем ``key: value``.
"""
from __future__ import annotations

from typing import TextIO

from ogx.aggregator import InspectionResult
from ogx.report.writer import write_report

NO_TAGS_NOTICE = "No OpenGraph tags found."


def format_text(result: InspectionResult) -> str:
    """Ключи по алфавиту, значения одного ключа в порядке документа."""
    lines = [f"URL: {result.url}", ""]
    if not result.tags:
        lines.append(NO_TAGS_NOTICE)
    for key, values in result.tags.sorted_items():
        lines.extend(f"{key}: {value}" for value in values)
    return "\n".join(lines) + "\n"


def render_text(result: InspectionResult, stream: TextIO) -> None:
    write_report(format_text(result), stream)
