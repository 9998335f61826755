# ogx/report/json_report.py

"""
Генерация JSON-отчёта ogx.

Схема: ``{"url": ..., "tags": {"og:key": [values...]}}``, ключи отсортированы,
отступ 2. Значения уже раскодированы, поэтому ничего не экранируется повторно.
"""
import json
from typing import TextIO

from ogx.aggregator import InspectionResult
from ogx.report.writer import write_report


def format_json(result: InspectionResult) -> str:
    """
    Сериализует result в JSON-строку с завершающим переводом строки.

    Пример:
    ```python
    from ogx.report.json_report import format_json
    print(format_json(result), end="")
    ```
    """
    return json.dumps(result.as_dict(), ensure_ascii=False, indent=2) + "\n"


def render_json(result: InspectionResult, stream: TextIO) -> None:
    write_report(format_json(result), stream)
