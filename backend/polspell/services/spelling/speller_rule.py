from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from polspell.core.casing import lowercase
from polspell.nlp.adapter import Token
from polspell.services.spelling.compounds import CompoundAnalyzer, CompoundDecision
from polspell.services.spelling.ordering import (
    AdditionalSuggestions,
    SuggestionOrdering,
    dedupe_suggestions,
    no_additional_suggestions,
    order_by_similarity,
)
from polspell.services.spelling.speller import SpellingOracle


logger = logging.getLogger(__name__)

RULE_ID = "SPELLER_RULE_PL_PL"
MessageKind = Literal["spelling"]

# "quasi-" and "niby-" attach to any word; the parts around them are checked on their own.
POLISH_TOKENIZING_PATTERN = re.compile(r"(?:[Qq]uasi|[Nn]iby)-")


@dataclass(frozen=True)
class SpellingMatch:
    start: int
    end: int
    word: str
    suggestions: tuple[str, ...] = ()
    message_kind: MessageKind = "spelling"
    rule_id: str = RULE_ID


@dataclass
class AcceptList:
    """Words accepted during one analysis context; later passes skip them."""

    words: set[str] = field(default_factory=set)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def add(self, word: str) -> None:
        self.words.add(word)


@dataclass(frozen=True)
class CheckResult:
    matches: tuple[SpellingMatch, ...]
    accepted: frozenset[str]


class SpellerRule:
    def __init__(
        self,
        *,
        speller: SpellingOracle,
        compounds: CompoundAnalyzer,
        locale: str = "pl_PL",
        additional_suggestions: AdditionalSuggestions = no_additional_suggestions,
        ordering: SuggestionOrdering = order_by_similarity,
        tokenizing_pattern: re.Pattern[str] | None = POLISH_TOKENIZING_PATTERN,
    ):
        self.speller = speller
        self.compounds = compounds
        self.locale = locale
        self.additional_suggestions = additional_suggestions
        self.ordering = ordering
        self.tokenizing_pattern = tokenizing_pattern

    def evaluate(
        self,
        word: str,
        start: int,
        accepted: AcceptList | None = None,
    ) -> list[SpellingMatch]:
        if not word:
            return []
        if accepted is not None and word in accepted:
            return []
        if not self.speller.is_misspelled(word):
            return []

        decision = self.compounds.analyze(word)
        if decision.is_compound:
            self._accept(decision, accepted)
            return []

        lower = lowercase(word, self.locale)
        if not self.speller.is_misspelled(lower):
            return [SpellingMatch(start=start, end=start + len(word), word=word, suggestions=(lower,))]

        return [
            SpellingMatch(
                start=start,
                end=start + len(word),
                word=word,
                suggestions=tuple(self._suggestions(word)),
            )
        ]

    def match_token(
        self,
        word: str,
        start: int,
        accepted: AcceptList | None = None,
    ) -> list[SpellingMatch]:
        """Checks a token, cutting it at hyphenated prefixes such as "niby-"."""
        if self.tokenizing_pattern is None:
            return self.evaluate(word, start, accepted)

        matches: list[SpellingMatch] = []
        index = 0
        for cut in self.tokenizing_pattern.finditer(word):
            matches.extend(self.evaluate(word[index : cut.start()], start + index, accepted))
            index = cut.end()
        matches.extend(self.evaluate(word[index:], start + index, accepted))
        return matches

    def check_tokens(self, tokens: Sequence[Token]) -> CheckResult:
        accepted = AcceptList()
        matches: list[SpellingMatch] = []
        for token in tokens:
            matches.extend(self.match_token(token.text, token.start, accepted))
        return CheckResult(matches=tuple(matches), accepted=frozenset(accepted.words))

    def _suggestions(self, word: str) -> list[str]:
        suggestions = list(self.speller.get_suggestions(word))
        suggestions.extend(self.additional_suggestions(tuple(suggestions), word))
        candidates = dedupe_suggestions(suggestions, word)
        if not candidates:
            return []
        return self.ordering(candidates, word)

    @staticmethod
    def _accept(decision: CompoundDecision, accepted: AcceptList | None) -> None:
        logger.debug(
            "speller_compound_accepted",
            extra={
                "word": decision.word,
                "splits": [f"{split.first}|{split.second}:{split.reason}" for split in decision.evidence],
            },
        )
        if accepted is not None:
            accepted.add(decision.word)
