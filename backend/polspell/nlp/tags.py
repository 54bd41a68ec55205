from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TagPattern:
    """A tag value from the external tagset, compared either exactly or by prefix.

    Tags are opaque: the only questions asked of them are whether a reading's
    tag equals the pattern, or begins with it (e.g. ``adj:`` for every
    inflected adjective reading).
    """

    value: str

    def matches_exactly(self, tag: str | None) -> bool:
        return tag is not None and tag == self.value

    def matches_partially(self, tag: str | None) -> bool:
        return tag is not None and tag.startswith(self.value)


ADJECTIVAL_PREFIX = TagPattern("adja")
COMPOUND_NUMERAL = TagPattern("num:comp")
ADVERB = TagPattern("adv")
ADJECTIVE = TagPattern("adj:")
