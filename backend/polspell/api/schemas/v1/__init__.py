from polspell.api.schemas.v1.spelling import (
    CompoundRequest,
    CompoundResponse,
    CompoundSplitItem,
    SpellingCheckRequest,
    SpellingCheckResponse,
    SpellingMatchItem,
    TokenInput,
)
from polspell.api.schemas.v1.tagging import ReadingItem, TaggedToken, TagRequest, TagResponse

__all__ = [
    "CompoundRequest",
    "CompoundResponse",
    "CompoundSplitItem",
    "SpellingCheckRequest",
    "SpellingCheckResponse",
    "SpellingMatchItem",
    "TokenInput",
    "ReadingItem",
    "TaggedToken",
    "TagRequest",
    "TagResponse",
]
