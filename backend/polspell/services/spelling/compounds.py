from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from polspell.nlp.adapter import MorphologicalProvider, TokenReadings
from polspell.nlp.tags import ADJECTIVAL_PREFIX, ADJECTIVE, ADVERB, COMPOUND_NUMERAL, TagPattern
from polspell.services.spelling.prefixes import PrefixSet
from polspell.services.spelling.speller import SpellingOracle


SplitReason = Literal["prefix", "tags"]

# Shortest first part tried when cutting a word in two.
MIN_FIRST_PART_LENGTH = 2


@dataclass(frozen=True)
class CompoundTagPolicy:
    adjectival_prefix: TagPattern = ADJECTIVAL_PREFIX
    compound_numeral: TagPattern = COMPOUND_NUMERAL
    adverb: TagPattern = ADVERB
    adjective: TagPattern = ADJECTIVE

    def is_modifier(self, readings: TokenReadings) -> bool:
        # "biało|zielony", "trzynasto|bitowy"
        if readings.has_tag(self.adjectival_prefix):
            return True
        return readings.has_tag(self.compound_numeral) and not readings.has_tag(self.adverb)

    def is_head(self, readings: TokenReadings) -> bool:
        return readings.has_partial_tag(self.adjective)


@dataclass(frozen=True)
class CompoundSplit:
    first: str
    second: str
    reason: SplitReason


@dataclass(frozen=True)
class CompoundDecision:
    word: str
    evidence: tuple[CompoundSplit, ...] = ()

    @property
    def is_compound(self) -> bool:
        return bool(self.evidence)


class CompoundAnalyzer:
    """Decides whether a flagged word is a prefix compound or a compound adjective.

    Every cut point is tried and every confirming split is kept as evidence;
    one is enough to accept the word. The analyzer never records anything
    itself, callers act on the returned decision.
    """

    def __init__(
        self,
        *,
        speller: SpellingOracle,
        provider: MorphologicalProvider,
        prefixes: PrefixSet,
        tag_policy: CompoundTagPolicy | None = None,
    ):
        self.speller = speller
        self.provider = provider
        self.prefixes = prefixes
        self.tag_policy = tag_policy or CompoundTagPolicy()

    def analyze(self, word: str) -> CompoundDecision:
        evidence: list[CompoundSplit] = []
        for index in range(MIN_FIRST_PART_LENGTH, len(word)):
            first, second = word[:index], word[index:]
            split = self._split_by_prefix(first, second) or self._split_by_tags(first, second)
            if split is not None:
                evidence.append(split)
        return CompoundDecision(word=word, evidence=tuple(evidence))

    def is_compound(self, word: str) -> bool:
        return self.analyze(word).is_compound

    def _split_by_prefix(self, first: str, second: str) -> CompoundSplit | None:
        if first in self.prefixes and not self.speller.is_misspelled(second):
            return CompoundSplit(first=first, second=second, reason="prefix")
        return None

    def _split_by_tags(self, first: str, second: str) -> CompoundSplit | None:
        tagged = self.provider.tag([first, second])
        if len(tagged) != 2:
            return None
        modifier, head = tagged
        if self.tag_policy.is_modifier(modifier) and self.tag_policy.is_head(head):
            return CompoundSplit(first=first, second=second, reason="tags")
        return None
