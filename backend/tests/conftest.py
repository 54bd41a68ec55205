from __future__ import annotations

from pathlib import Path

import pytest

from polspell.core.config import Settings
from polspell.nlp.tagger import DualCaseTagger
from polspell.services.spelling.compounds import CompoundAnalyzer
from polspell.services.spelling.prefixes import load_prefix_set
from polspell.services.spelling.speller_rule import SpellerRule


WORDS = (
    "biało",
    "bitowy",
    "stolica",
    "szybki",
    "szybko",
    "trzynaście",
    "ważny",
    "Warszawa",
    "zielony",
    "przyjaciel",
)

LEXICON = {
    "biało": [("biało", "adja"), ("biało", "adv:pos")],
    "bitowy": [("bitowy", "adj:sg:nom.voc:m1.m2.m3:pos")],
    "stolica": [("stolica", "subst:sg:nom:f")],
    "szybki": [("szybki", "adj:sg:nom.voc:m1.m2.m3:pos")],
    "szybko": [("szybko", "adv:pos")],
    "trzynasto": [("trzynaście", "num:comp")],
    "ważny": [("ważny", "adj:sg:nom.voc:m1.m2.m3:pos")],
    "Warszawa": [("Warszawa", "subst:sg:nom:f")],
    "zielony": [("zielony", "adj:sg:nom.voc:m1.m2.m3:pos")],
}


class StubSpeller:
    def __init__(self, words=WORDS, suggestions: dict[str, list[str]] | None = None):
        self.words = set(words)
        self.suggestions = suggestions or {}
        self.checked: list[str] = []

    def is_misspelled(self, word: str) -> bool:
        self.checked.append(word)
        return bool(word) and word not in self.words

    def get_suggestions(self, word: str) -> list[str]:
        return list(self.suggestions.get(word, []))


class StubStemmer:
    def __init__(self, entries=None):
        self.entries = LEXICON if entries is None else entries
        self.calls: list[str] = []

    def stem(self, word: str) -> list[tuple[str, str]] | None:
        self.calls.append(word)
        found = self.entries.get(word)
        return list(found) if found else None

    def metadata(self) -> dict[str, str]:
        return {"stemmer": "StubStemmer"}


def build_rule(speller=None, stemmer=None, **kwargs) -> SpellerRule:
    speller = speller or StubSpeller()
    tagger = DualCaseTagger(stemmer or StubStemmer())
    return SpellerRule(
        speller=speller,
        compounds=CompoundAnalyzer(speller=speller, provider=tagger, prefixes=load_prefix_set()),
        **kwargs,
    )


@pytest.fixture
def make_speller():
    return StubSpeller


@pytest.fixture
def make_stemmer():
    return StubStemmer


@pytest.fixture
def make_rule():
    return build_rule


@pytest.fixture
def stub_stemmer_factory():
    return lambda _settings: StubStemmer()


@pytest.fixture
def resource_settings(tmp_path: Path) -> Settings:
    dictionary_path = tmp_path / "pl_words.txt"
    dictionary_path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    lexicon_path = tmp_path / "pl_lexicon.tsv"
    lexicon_path.write_text(
        "".join(
            f"{form}\t{lemma}\t{tag}\n"
            for form, readings in LEXICON.items()
            for lemma, tag in readings
        ),
        encoding="utf-8",
    )
    return Settings(
        environment="test",
        app_name="polspell-backend-test",
        host="127.0.0.1",
        port=8001,
        dictionary_paths=(dictionary_path,),
        lexicon_path=lexicon_path,
    )
