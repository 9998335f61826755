"""ogx.errors: Ошибки конвейера извлечения OpenGraph-тегов.

Все ошибки терминальные: повторных попыток нет, CLI печатает ``str(exc)``
одной строкой в stderr и завершается с ненулевым кодом.
"""

from __future__ import annotations

from typing import Sequence

__all__: Sequence[str] = (
    "OgxError",
    "InvalidInput",
    "NetworkError",
    "HTTPStatusError",
    "OutputError",
)


class OgxError(Exception):
    """Базовая ошибка ogx."""


class InvalidInput(OgxError):
    """Пустой или неразбираемый URL."""

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        if not value:
            message = "url cannot be empty"
        else:
            message = f'invalid URL "{value}"'
        super().__init__(message)


class NetworkError(OgxError):
    """Запрос не удалось отправить или он не уложился в таймаут."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"request failed: {reason}")


class HTTPStatusError(OgxError):
    """Код ответа вне диапазона [200, 400)."""

    def __init__(self, url: str, status: int, reason: str | None = None) -> None:
        self.url = url
        self.status = status
        self.reason = reason or ""
        super().__init__(f"unexpected HTTP status: {status} {self.reason}".rstrip())


class OutputError(OgxError):
    """Не удалось записать отчёт."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"write failed: {reason}")
