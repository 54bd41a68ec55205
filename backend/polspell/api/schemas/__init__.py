from polspell.api.schemas.v1 import (
    CompoundRequest,
    CompoundResponse,
    SpellingCheckRequest,
    SpellingCheckResponse,
    SpellingMatchItem,
    TaggedToken,
    TagRequest,
    TagResponse,
)

__all__ = [
    "CompoundRequest",
    "CompoundResponse",
    "SpellingCheckRequest",
    "SpellingCheckResponse",
    "SpellingMatchItem",
    "TaggedToken",
    "TagRequest",
    "TagResponse",
]
