"""ogx.report.writer: Запись готового отчёта в поток."""

from __future__ import annotations

from typing import TextIO

from ogx.errors import OutputError


def write_report(rendered: str, stream: TextIO) -> None:
    """Пишет *rendered* в *stream*; ошибки ввода-вывода превращаются в OutputError."""
    try:
        stream.write(rendered)
        stream.flush()
    except OSError as exc:
        raise OutputError(exc.strerror or str(exc)) from exc
