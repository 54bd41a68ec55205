from __future__ import annotations

import dataclasses

import pytest

from polspell.core.errors import ResourceUnavailableError
from polspell.services.spelling.prefixes import POLISH_PREFIXES, PrefixSet, load_prefix_set


def test_builtin_prefix_set_matches_case_insensitively() -> None:
    prefixes = load_prefix_set()

    assert len(prefixes) == len(POLISH_PREFIXES)
    assert "arcy" in prefixes
    assert "ARCY" in prefixes
    assert "Śród" in prefixes
    assert "arc" not in prefixes
    assert 42 not in prefixes


def test_prefix_set_is_immutable() -> None:
    prefixes = PrefixSet.from_iterable(["Mini", " maksi ", ""])

    assert prefixes.prefixes == frozenset({"mini", "maksi"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        prefixes.prefixes = frozenset()  # type: ignore[misc]


def test_prefix_file_overrides_builtin_list(tmp_path) -> None:
    prefix_path = tmp_path / "prefixes.txt"
    prefix_path.write_text("# custom list\nmega\ngiga  # both work\n\n", encoding="utf-8")

    prefixes = load_prefix_set(prefix_path)

    assert prefixes.prefixes == frozenset({"mega", "giga"})
    assert "arcy" not in prefixes


def test_missing_prefix_file_is_resource_unavailable(tmp_path) -> None:
    with pytest.raises(ResourceUnavailableError):
        load_prefix_set(tmp_path / "absent.txt")
