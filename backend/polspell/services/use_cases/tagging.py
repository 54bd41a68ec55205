from __future__ import annotations

from polspell.api.schemas.v1.tagging import ReadingItem, TaggedToken, TagResponse
from polspell.nlp.tagger import DualCaseTagger


class TaggingUseCase:
    def __init__(self, tagger: DualCaseTagger):
        self._tagger = tagger

    def execute(self, tokens: list[str]) -> TagResponse:
        tagged = self._tagger.tag(tokens)
        return TagResponse(
            tokens=[
                TaggedToken(
                    token=token,
                    readings=[
                        ReadingItem(lemma=reading.lemma, tag=reading.tag, start=reading.start)
                        for reading in readings
                    ],
                    is_unknown=all(reading.is_placeholder for reading in readings),
                )
                for token, readings in zip(tokens, tagged, strict=True)
            ]
        )
