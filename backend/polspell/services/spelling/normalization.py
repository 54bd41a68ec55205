from __future__ import annotations

import unicodedata


def nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def normalize_for_dedupe(text: str) -> str:
    return nfc(text.strip()).casefold()


def is_all_uppercase(word: str) -> bool:
    return any(char.isalpha() for char in word) and word.upper() == word and word.lower() != word


def is_camel_case(word: str) -> bool:
    seen_lower = False
    for char in word:
        if char.islower():
            seen_lower = True
        elif char.isupper() and seen_lower:
            return True
    return False


def contains_digit(word: str) -> bool:
    return any(char.isdigit() for char in word)
