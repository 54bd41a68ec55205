from __future__ import annotations

from polspell.services.spelling.normalization import is_all_uppercase, is_camel_case
from polspell.services.spelling.ordering import dedupe_suggestions, order_by_similarity


def test_dedupe_keeps_first_spelling_of_each_value() -> None:
    assert dedupe_suggestions(["Kot", "kot", " kota ", "", "KOTA", "kott"], "kott") == ["Kot", "kota"]


def test_dedupe_treats_composed_and_decomposed_forms_as_equal() -> None:
    decomposed = "z\u0307le"
    assert dedupe_suggestions(["żle", decomposed], "zle") == ["żle"]


def test_order_by_similarity_prefers_closer_candidates() -> None:
    ordered = order_by_similarity(["kotlet", "kota", "kat", "kot"], "kotx")

    assert ordered == ["kot", "kota", "kat", "kotlet"]


def test_order_by_similarity_is_stable_for_ties() -> None:
    assert order_by_similarity(["koty", "kota"], "kotx") == ["koty", "kota"]


def test_order_by_similarity_compares_casefolded_forms() -> None:
    # "straße" folds to "strasse", an exact match for "STRASSE".
    assert order_by_similarity(["strabe", "STRASSE"], "straße") == ["STRASSE", "strabe"]


def test_case_shape_helpers() -> None:
    assert is_all_uppercase("NATO")
    assert not is_all_uppercase("Nato")
    assert not is_all_uppercase("123")
    assert is_camel_case("iPhone")
    assert not is_camel_case("Stolica")
