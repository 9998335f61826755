#!/usr/bin/env python3
"""
Точка входа ogx: показать OpenGraph-метаданные одной страницы.

Использование:
  ogx <url> [--timeout 10s] [--json]

Опции:
  --timeout DURATION  Таймаут HTTP-запроса (10s, 500ms, 1m30s; default: 10s)
  --json              Вывести результат в JSON вместо текста
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...; логи идут в stderr)
  --log-file PATH     Дополнительно писать логи в файл
  --version, -v       Показать версию ogx

Примеры:
  ogx https://example.com
  ogx example.com
  ogx example.com --json
"""
import sys
from pathlib import Path
from typing import NoReturn

import click
from pydantic import ValidationError

from ogx import __version__
from ogx.config import InspectorConfig
from ogx.engine import inspect_url
from ogx.errors import OgxError
from ogx.logger import init_logging
from ogx.report.json_report import render_json
from ogx.report.text_report import render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str) -> NoReturn:
    click.secho(message, fg="red", err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-v", message="ogx, version %(version)s")
@click.argument("url")
@click.option(
    "--timeout", "timeout",
    default="10s", show_default=True,
    help="HTTP request timeout (e.g. 10s, 500ms, 1m30s)",
)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option(
    "--log-level", "log_level",
    default="WARNING", show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Logging level (logs go to stderr)",
)
@click.option(
    "--log-file", "log_file",
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help="Also write logs to this file",
)
def cli(url, timeout, json_output, log_level, log_file):
    """Inspect OpenGraph metadata for URL."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    try:
        config = InspectorConfig(timeout=timeout)
    except ValidationError as e:
        print_error(f"invalid timeout {timeout!r}: {e.errors()[0]['msg']}")

    try:
        result = inspect_url(url, config)
    except OgxError as e:
        print_error(str(e))

    try:
        if json_output:
            render_json(result, sys.stdout)
        else:
            render_text(result, sys.stdout)
    except OgxError as e:
        print_error(str(e))


if __name__ == "__main__":
    cli()
