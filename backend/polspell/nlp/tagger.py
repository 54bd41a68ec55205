from __future__ import annotations

from collections.abc import Sequence

from polspell.core.casing import lowercase
from polspell.nlp.adapter import Reading, Stemmer, TokenReadings


class DualCaseTagger:
    """Tags tokens by stemming both their literal and lower-cased forms.

    Sentence-initial or shouted words ("Stolica", "STOLICA") are only in the
    lexicon lower-cased, while proper nouns are only there capitalized; asking
    for both and merging keeps either kind of reading. Literal-form readings
    always come first.
    """

    def __init__(self, stemmer: Stemmer, *, locale: str = "pl_PL"):
        self.stemmer = stemmer
        self.locale = locale

    def tag(self, tokens: Sequence[str]) -> list[TokenReadings]:
        tagged: list[TokenReadings] = []
        position = 0
        for token in tokens:
            literal, lowered = self._lookup(token)
            readings = self._merge(token, literal, lowered)
            if not readings:
                readings = [Reading(token=token, lemma=None, tag=None, start=position)]
            position += len(token)
            tagged.append(TokenReadings(tuple(readings)))
        return tagged

    def create_null_token(self, token: str, start: int) -> TokenReadings:
        return TokenReadings((Reading(token=token, lemma=None, tag=None, start=start),))

    def metadata(self) -> dict[str, str]:
        return {"tagger": self.__class__.__name__, "locale": self.locale, **self.stemmer.metadata()}

    def _lookup(self, token: str) -> tuple[list[tuple[str, str]], list[tuple[str, str]]]:
        literal = self.stemmer.stem(token) or []
        lower = lowercase(token, self.locale)
        if lower == token:
            return literal, []
        return literal, self.stemmer.stem(lower) or []

    @staticmethod
    def _merge(
        token: str,
        literal: list[tuple[str, str]],
        lowered: list[tuple[str, str]],
    ) -> list[Reading]:
        # Every reading keeps the surface token, whichever case produced it.
        return [Reading(token=token, lemma=lemma, tag=tag) for lemma, tag in literal + lowered]
