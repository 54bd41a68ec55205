from __future__ import annotations


# Languages whose dotted/dotless I pairs do not follow the default Unicode mapping.
_TURKIC_LANGUAGES = {"tr", "az"}


def language_of(locale: str) -> str:
    return locale.replace("-", "_").split("_", 1)[0].lower()


def lowercase(text: str, locale: str = "pl_PL") -> str:
    if language_of(locale) in _TURKIC_LANGUAGES:
        text = text.replace("I", "ı").replace("İ", "i")
    return text.lower()
