from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from symspellpy import SymSpell, Verbosity

from polspell.core.errors import ResourceUnavailableError
from polspell.services.spelling.cache import LRUCache
from polspell.services.spelling.normalization import (
    contains_digit,
    is_all_uppercase,
    is_camel_case,
)


logger = logging.getLogger(__name__)


class SpellingOracle(Protocol):
    def is_misspelled(self, word: str) -> bool:
        ...

    def get_suggestions(self, word: str) -> list[str]:
        ...


class DictionarySpeller:
    """Word-list spelling oracle with SymSpell suggestions.

    Membership is case-sensitive; a capitalized word is only correct when the
    list holds it capitalized.
    """

    def __init__(
        self,
        *,
        dictionary_paths: Iterable[Path],
        max_edit_distance: int = 2,
        max_suggestions: int = 10,
        prefix_length: int = 7,
        ignore_numbers: bool = True,
        ignore_all_uppercase: bool = False,
        ignore_camel_case: bool = False,
    ) -> None:
        self.dictionary_paths = _unique_paths(dictionary_paths)
        self.max_edit_distance = max_edit_distance
        self.max_suggestions = max_suggestions
        self.ignore_numbers = ignore_numbers
        self.ignore_all_uppercase = ignore_all_uppercase
        self.ignore_camel_case = ignore_camel_case
        self._symspell = SymSpell(
            max_dictionary_edit_distance=max_edit_distance,
            prefix_length=prefix_length,
        )
        self._words: set[str] = set()
        self._suggestion_cache = LRUCache[str, tuple[str, ...]](max_size=4096)
        self._load()

    @property
    def word_count(self) -> int:
        return len(self._words)

    def _load(self) -> None:
        missing = [path for path in self.dictionary_paths if not path.exists()]
        for path in missing:
            logger.warning("speller_dictionary_missing", extra={"dictionary_path": str(path)})
        available = [path for path in self.dictionary_paths if path.exists()]
        if not available:
            raise ResourceUnavailableError(
                "spelling_dictionary",
                "no dictionary file found in " + ", ".join(str(path) for path in self.dictionary_paths),
            )

        for dictionary_path in available:
            words = {
                line.strip()
                for line in dictionary_path.read_text(encoding="utf-8").splitlines()
                if line.strip() and not line.startswith("#")
            }
            self._words.update(words)
            logger.info(
                "speller_dictionary_loaded",
                extra={"dictionary_path": str(dictionary_path), "words": len(words)},
            )
        for word in self._words:
            self._symspell.create_dictionary_entry(word, 1)

    def is_known_word(self, word: str) -> bool:
        return word in self._words

    def is_misspelled(self, word: str) -> bool:
        if not word:
            return False
        if self.ignore_numbers and contains_digit(word):
            return False
        if self.ignore_all_uppercase and is_all_uppercase(word):
            return False
        if self.ignore_camel_case and is_camel_case(word):
            return False
        return not self.is_known_word(word)

    def get_suggestions(self, word: str) -> list[str]:
        if not word:
            return []
        return list(self._suggestion_cache.get_or_compute(word, self._lookup))

    def metadata(self) -> dict[str, str]:
        return {
            "speller": self.__class__.__name__,
            "dictionaries": ",".join(path.name for path in self.dictionary_paths if path.exists()),
            "words": str(self.word_count),
        }

    def _lookup(self, word: str) -> tuple[str, ...]:
        results = self._symspell.lookup(
            word,
            Verbosity.ALL,
            max_edit_distance=self.max_edit_distance,
            include_unknown=False,
            transfer_casing=False,
        )
        return tuple(result.term for result in results[: self.max_suggestions])


def _unique_paths(paths: Iterable[Path]) -> tuple[Path, ...]:
    seen: set[Path] = set()
    unique_paths: list[Path] = []
    for path in paths:
        if path in seen:
            continue
        seen.add(path)
        unique_paths.append(path)
    return tuple(unique_paths)
