"""ogx.aggregator: Сбор пар (ключ, значение) в упорядоченное мульти-отображение."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from ogx.parser.og_parser import TagPair


class TagMap(Mapping[str, tuple[str, ...]]):
    """Ключ -> значения в порядке документа.

    Ключи хранятся в порядке первого появления; лексическая сортировка
    делается только при выводе (:meth:`sorted_items`).
    """

    __slots__ = ("_values", "_frozen")

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}
        self._frozen = False

    def add(self, key: str, value: str) -> None:
        if self._frozen:
            raise RuntimeError("TagMap is frozen")
        self._values.setdefault(key, []).append(value)

    def extend(self, pairs: Iterable[TagPair]) -> None:
        for key, value in pairs:
            self.add(key, value)

    def freeze(self) -> TagMap:
        """Запрещает дальнейшие изменения (после конца потока)."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return tuple(self._values[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def value_count(self) -> int:
        return sum(len(v) for v in self._values.values())

    def sorted_items(self) -> list[tuple[str, tuple[str, ...]]]:
        return [(key, tuple(self._values[key])) for key in sorted(self._values)]

    def __repr__(self) -> str:
        return f"TagMap({self._values!r})"


@dataclass(slots=True, frozen=True)
class InspectionResult:
    """Итог одного запуска: нормализованный URL и найденные теги."""

    url: str
    tags: TagMap = field(default_factory=TagMap)

    def as_dict(self) -> dict[str, object]:
        """Структурное представление: ключи по алфавиту, значения в порядке документа."""
        return {
            "url": self.url,
            "tags": {key: list(values) for key, values in self.tags.sorted_items()},
        }


def aggregate_tags(pairs: Iterable[TagPair]) -> TagMap:
    """Собирает все пары в замороженный TagMap."""
    tags = TagMap()
    tags.extend(pairs)
    return tags.freeze()
