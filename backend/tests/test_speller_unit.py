from __future__ import annotations

import pytest

from polspell.core.errors import ResourceUnavailableError
from polspell.services.spelling.speller import DictionarySpeller


def _speller(tmp_path, words: str = "stolica\nWarszawa\nzielony\n", **kwargs) -> DictionarySpeller:
    dictionary_path = tmp_path / "pl_words.txt"
    dictionary_path.write_text(words, encoding="utf-8")
    return DictionarySpeller(dictionary_paths=(dictionary_path,), **kwargs)


def test_membership_is_case_sensitive(tmp_path) -> None:
    speller = _speller(tmp_path)

    assert not speller.is_misspelled("stolica")
    assert speller.is_misspelled("Stolica")
    assert not speller.is_misspelled("Warszawa")
    assert speller.is_misspelled("warszawa")


def test_empty_word_and_numbers_are_not_misspelled(tmp_path) -> None:
    speller = _speller(tmp_path)

    assert not speller.is_misspelled("")
    assert not speller.is_misspelled("A4")
    assert _speller(tmp_path, ignore_numbers=False).is_misspelled("A4")


def test_uppercase_and_camel_case_options(tmp_path) -> None:
    default = _speller(tmp_path)
    lenient = _speller(tmp_path, ignore_all_uppercase=True, ignore_camel_case=True)

    assert default.is_misspelled("NATO")
    assert default.is_misspelled("iPhone")
    assert not lenient.is_misspelled("NATO")
    assert not lenient.is_misspelled("iPhone")


def test_suggestions_come_from_the_word_list(tmp_path) -> None:
    speller = _speller(tmp_path)

    assert speller.get_suggestions("stolca")[0] == "stolica"
    assert speller.get_suggestions("zileony")[0] == "zielony"
    assert speller.get_suggestions("") == []


def test_suggestions_are_cached(tmp_path) -> None:
    speller = _speller(tmp_path)

    first = speller.get_suggestions("stolca")
    second = speller.get_suggestions("stolca")

    assert first == second
    assert speller._suggestion_cache.hits == 1


def test_suggestions_respect_limit(tmp_path) -> None:
    speller = _speller(tmp_path, words="kota\nkoty\nkoto\nkotu\n", max_suggestions=2)

    assert len(speller.get_suggestions("kotx")) == 2


def test_missing_dictionaries_are_skipped_when_one_exists(tmp_path) -> None:
    present = tmp_path / "present.txt"
    present.write_text("kot\n", encoding="utf-8")

    speller = DictionarySpeller(dictionary_paths=(tmp_path / "absent.txt", present, present))

    assert speller.word_count == 1
    assert speller.dictionary_paths == (tmp_path / "absent.txt", present)


def test_no_dictionary_is_resource_unavailable(tmp_path) -> None:
    with pytest.raises(ResourceUnavailableError):
        DictionarySpeller(dictionary_paths=(tmp_path / "absent.txt",))
