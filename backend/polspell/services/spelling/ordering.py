from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

from polspell.services.spelling.normalization import nfc, normalize_for_dedupe


SuggestionOrdering = Callable[[Sequence[str], str], list[str]]
AdditionalSuggestions = Callable[[Sequence[str], str], Iterable[str]]


def no_additional_suggestions(suggestions: Sequence[str], word: str) -> Iterable[str]:
    return ()


def dedupe_suggestions(candidates: Iterable[str], word: str) -> list[str]:
    """Drops blanks, the flagged word and case-insensitive repeats, keeping first occurrences."""
    excluded = nfc(word)
    seen: set[str] = set()
    unique: list[str] = []
    for raw in candidates:
        candidate = raw.strip()
        key = normalize_for_dedupe(candidate)
        if not key or key in seen or nfc(candidate) == excluded:
            continue
        seen.add(key)
        unique.append(candidate)
    return unique


def order_by_similarity(candidates: Sequence[str], word: str) -> list[str]:
    """Edit distance first, then similarity ratio, then the order the oracle gave.

    Both sides are compared in the same NFC + casefold form used for deduplication.
    """
    folded_word = normalize_for_dedupe(word)

    def sort_key(item: tuple[int, str]) -> tuple[int, float, int]:
        position, candidate = item
        folded = normalize_for_dedupe(candidate)
        return (
            Levenshtein.distance(folded_word, folded),
            -fuzz.ratio(folded_word, folded),
            position,
        )

    return [candidate for _, candidate in sorted(enumerate(candidates), key=sort_key)]
