from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol

from polspell.nlp.tags import TagPattern


@dataclass(frozen=True)
class Token:
    text: str
    start: int


@dataclass(frozen=True)
class Reading:
    token: str
    lemma: str | None
    tag: str | None
    start: int | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.lemma is None and self.tag is None


@dataclass(frozen=True)
class TokenReadings:
    readings: tuple[Reading, ...]

    def __iter__(self) -> Iterator[Reading]:
        return iter(self.readings)

    def __len__(self) -> int:
        return len(self.readings)

    @property
    def token(self) -> str | None:
        return self.readings[0].token if self.readings else None

    def has_tag(self, pattern: TagPattern) -> bool:
        return any(pattern.matches_exactly(reading.tag) for reading in self.readings)

    def has_partial_tag(self, pattern: TagPattern) -> bool:
        return any(pattern.matches_partially(reading.tag) for reading in self.readings)


class Stemmer(Protocol):
    def stem(self, word: str) -> list[tuple[str, str]] | None:
        ...

    def metadata(self) -> dict[str, str]:
        ...


class MorphologicalProvider(Protocol):
    def tag(self, tokens: Sequence[str]) -> list[TokenReadings]:
        ...
