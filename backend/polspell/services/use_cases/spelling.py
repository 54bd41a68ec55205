from __future__ import annotations

from polspell.api.schemas.v1.spelling import (
    CompoundResponse,
    CompoundSplitItem,
    SpellingCheckResponse,
    SpellingMatchItem,
    TokenInput,
)
from polspell.nlp.adapter import Token
from polspell.services.spelling.speller_rule import SpellerRule


class SpellingCheckUseCase:
    def __init__(self, rule: SpellerRule):
        self._rule = rule

    def execute(self, tokens: list[TokenInput]) -> SpellingCheckResponse:
        result = self._rule.check_tokens([Token(text=item.text, start=item.start) for item in tokens])
        return SpellingCheckResponse(
            matches=[
                SpellingMatchItem(
                    start=match.start,
                    end=match.end,
                    word=match.word,
                    message_kind=match.message_kind,
                    rule_id=match.rule_id,
                    suggestions=list(match.suggestions),
                )
                for match in result.matches
            ],
            accepted_compounds=sorted(result.accepted),
        )

    def explain_compound(self, word: str) -> CompoundResponse:
        decision = self._rule.compounds.analyze(word)
        return CompoundResponse(
            word=decision.word,
            is_compound=decision.is_compound,
            evidence=[
                CompoundSplitItem(first=split.first, second=split.second, reason=split.reason)
                for split in decision.evidence
            ],
        )
