"""
Модуль конфигурации одного запуска ogx.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import math
import re
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

# OG-теги ожидаются в <head>, поэтому первых 2 MiB достаточно.
MAX_BODY_BYTES: Final[int] = 2 << 20
DEFAULT_TIMEOUT: Final[float] = 10.0
USER_AGENT: Final[str] = "ogx/1.0"

_UNITS: Final[dict[str, float]] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_DURATION_RE = re.compile(rf"^(?:{_DURATION_PART.pattern})+$")
_SECONDS_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


def parse_duration(value: str) -> float:
    """Переводит строку вида ``10s``, ``500ms``, ``1m30s`` или ``2.5`` в секунды."""
    text = value.strip()
    if _SECONDS_RE.match(text):
        seconds = float(text)
    elif _DURATION_RE.match(text):
        seconds = sum(float(num) * _UNITS[unit] for num, unit in _DURATION_PART.findall(text))
    else:
        raise ValueError(f"invalid duration {value!r}")
    if not math.isfinite(seconds):
        raise ValueError(f"duration out of range {value!r}")
    return seconds


class InspectorConfig(BaseModel):
    """Настройки одного запуска: таймаут, User-Agent и лимиты чтения тела ответа."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(
        DEFAULT_TIMEOUT, gt=0, allow_inf_nan=False, description="Таймаут на весь запрос (секунд)."
    )
    user_agent: str = Field(USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    max_body_bytes: int = Field(MAX_BODY_BYTES, ge=1, description="Сколько байт тела читать.")
    chunk_size: int = Field(64 * 1024, ge=1, description="Размер одного чтения из потока.")

    @field_validator("timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_duration(v)
        return v
