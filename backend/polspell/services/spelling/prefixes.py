from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from polspell.core.casing import lowercase
from polspell.core.errors import ResourceUnavailableError


logger = logging.getLogger(__name__)

# Polish prefixes that form valid words with any correct stem and must never be
# reported as a misspelled stem of their own.
POLISH_PREFIXES = (
    "anty",
    "arcy",
    "bez",
    "beze",
    "eks",
    "ekstra",
    "hiper",
    "infra",
    "kontr",
    "maksi",
    "midi",
    "między",
    "mini",
    "nad",
    "nade",
    "neo",
    "około",
    "ponad",
    "post",
    "pre",
    "pro",
    "przeciw",
    "pseudo",
    "super",
    "śród",
    "ultra",
    "wice",
    "wokół",
    "wokoło",
)


@dataclass(frozen=True)
class PrefixSet:
    prefixes: frozenset[str]
    locale: str = "pl_PL"

    @classmethod
    def from_iterable(cls, prefixes: Iterable[str], *, locale: str = "pl_PL") -> PrefixSet:
        normalized = frozenset(
            lowercase(prefix.strip(), locale) for prefix in prefixes if prefix.strip()
        )
        return cls(prefixes=normalized, locale=locale)

    def __contains__(self, candidate: object) -> bool:
        if not isinstance(candidate, str):
            return False
        return lowercase(candidate, self.locale) in self.prefixes

    def __len__(self) -> int:
        return len(self.prefixes)


def load_prefix_set(path: Path | None = None, *, locale: str = "pl_PL") -> PrefixSet:
    if path is None:
        return PrefixSet.from_iterable(POLISH_PREFIXES, locale=locale)
    if not path.exists():
        raise ResourceUnavailableError("prefix_list", f"file not found: {path}")

    prefixes = [
        line.split("#", 1)[0].strip()
        for line in path.read_text(encoding="utf-8").splitlines()
    ]
    prefix_set = PrefixSet.from_iterable(prefixes, locale=locale)
    logger.info("prefix_list_loaded", extra={"prefix_path": str(path), "prefixes": len(prefix_set)})
    return prefix_set
