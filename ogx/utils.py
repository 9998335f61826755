"""ogx.utils: Нормализация пользовательского ввода в абсолютный URL."""

from __future__ import annotations

from typing import Sequence

from pydantic import AnyUrl, TypeAdapter, ValidationError

from ogx.errors import InvalidInput
from ogx.logger import logger

__all__: Sequence[str] = ("DEFAULT_SCHEME", "normalize_url")

DEFAULT_SCHEME = "https"

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def normalize_url(raw: str) -> str:
    """Превращает ввод вроде ``example.com`` в канонический абсолютный URL.

    Пробелы по краям отбрасываются; если нет ``://``, добавляется ``https://``.
    Бросает :class:`~ogx.errors.InvalidInput`, если строка пуста, не разбирается
    или в ней нет схемы либо хоста.
    """
    value = raw.strip()
    if not value:
        raise InvalidInput(value)
    if "://" not in value:
        value = f"{DEFAULT_SCHEME}://{value}"

    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise InvalidInput(value, reason=exc.errors()[0]["msg"]) from exc

    if not url.scheme or not url.host:
        raise InvalidInput(value, reason="missing scheme or host")

    normalized = str(url)
    logger.debug("Normalized URL: %s -> %s", raw, normalized)
    return normalized
