from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path

from polspell.core.errors import ResourceUnavailableError


logger = logging.getLogger(__name__)

# Alternative tags for one (form, lemma) pair share a line, joined by "+".
_TAG_ALTERNATIVE_SEPARATOR = "+"


class LexiconStemmer:
    """Per-token stemmer over a tab-separated ``form, lemma, tag`` lexicon.

    Lookups are case-sensitive: the lexicon lists proper nouns capitalized and
    common words lower-cased, and callers decide which case variants to ask for.
    """

    def __init__(self, lexicon_path: Path):
        self.lexicon_path = lexicon_path
        self._entries: dict[str, list[tuple[str, str]]] = {}
        self._load()

    def _load(self) -> None:
        if not self.lexicon_path.exists():
            raise ResourceUnavailableError("lexicon", f"file not found: {self.lexicon_path}")

        entries: defaultdict[str, list[tuple[str, str]]] = defaultdict(list)
        skipped = 0
        for line in self.lexicon_path.read_text(encoding="utf-8").splitlines():
            if not line.strip() or line.startswith("#"):
                continue
            columns = line.split("\t")
            if len(columns) != 3:
                skipped += 1
                continue
            form, lemma, raw_tags = (column.strip() for column in columns)
            for tag in raw_tags.split(_TAG_ALTERNATIVE_SEPARATOR):
                if tag and (lemma, tag) not in entries[form]:
                    entries[form].append((lemma, tag))
        self._entries = dict(entries)
        logger.info(
            "lexicon_loaded",
            extra={
                "lexicon_path": str(self.lexicon_path),
                "forms": len(self._entries),
                "skipped_lines": skipped,
            },
        )

    def stem(self, word: str) -> list[tuple[str, str]] | None:
        found = self._entries.get(word)
        return list(found) if found else None

    def metadata(self) -> dict[str, str]:
        return {
            "stemmer": self.__class__.__name__,
            "lexicon": self.lexicon_path.name,
            "forms": str(len(self._entries)),
        }
