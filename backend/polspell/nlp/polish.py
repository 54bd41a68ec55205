from __future__ import annotations

import logging
from importlib.metadata import version as package_version

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from polspell.core.config import Settings
from polspell.core.errors import ResourceUnavailableError
from polspell.nlp.adapter import Stemmer
from polspell.nlp.lexicon import LexiconStemmer


logger = logging.getLogger(__name__)

# Universal Dependencies features mapped back to NKJP tag segments, in NKJP order.
_NUMBER = {"Sing": "sg", "Plur": "pl"}
_CASE = {
    "Nom": "nom",
    "Gen": "gen",
    "Dat": "dat",
    "Acc": "acc",
    "Ins": "inst",
    "Loc": "loc",
    "Voc": "voc",
}
_MASCULINE_ANIMACY = {"Hum": "m1", "Anim": "m2", "Inan": "m3"}
_GENDER = {"Fem": "f", "Neut": "n"}
_DEGREE = {"Pos": "pos", "Cmp": "com", "Sup": "sup"}
# NKJP classes that carry no grammatical segments.
_BARE_CLASSES = {"adja", "adjc", "adjp"}


class SpacyPolishStemmer:
    """Stemmer backed by a Polish spaCy pipeline.

    spaCy gives one analysis per token in context, so every lookup yields at
    most a single ``(lemma, tag)`` pair. Tags are rebuilt into the lower-cased,
    colon-separated NKJP form the lexicon uses.
    """

    def __init__(self, model_name: str):
        self.model_name = model_name
        # Import lazily so the lexicon backend works without spaCy models installed.
        import spacy

        try:
            self._nlp = spacy.load(model_name)
        except OSError as exc:
            raise ResourceUnavailableError("spacy_model", f"{model_name}: {exc}") from exc
        self._warn_if_spacy_version_incompatible()

    def stem(self, word: str) -> list[tuple[str, str]] | None:
        cleaned = word.strip()
        if not cleaned:
            return None

        doc = self._nlp(cleaned)
        for token in doc:
            if token.is_space or token.is_punct:
                continue
            tag = _nkjp_tag(token)
            lemma = token.lemma_ or token.text
            if not tag:
                return None
            return [(lemma, tag)]
        return None

    def metadata(self) -> dict[str, str]:
        return {
            "stemmer": self.__class__.__name__,
            "spacy": package_version("spacy"),
            "model": self.model_name,
        }

    def _warn_if_spacy_version_incompatible(self) -> None:
        runtime_version_str = package_version("spacy")
        model_spec = str(self._nlp.meta.get("spacy_version") or "").strip()
        if not model_spec:
            return

        try:
            runtime_version = Version(runtime_version_str)
            compat_spec = SpecifierSet(model_spec)
        except (InvalidSpecifier, InvalidVersion):
            logger.warning(
                "nlp_spacy_version_parse_failed",
                extra={
                    "model": self.model_name,
                    "runtime_spacy": runtime_version_str,
                    "model_spacy_spec": model_spec,
                },
            )
            return

        if compat_spec.contains(runtime_version, prereleases=True):
            return

        logger.warning(
            "nlp_model_spacy_version_mismatch",
            extra={
                "model": self.model_name,
                "runtime_spacy": runtime_version_str,
                "model_spacy_spec": model_spec,
            },
        )


def _nkjp_tag(token) -> str:
    """Rebuilds a colon-separated NKJP tag such as ``adj:sg:nom:m3:pos``.

    Polish pipelines keep only the grammatical class in ``tag_`` and move
    number, case, gender and degree into ``token.morph``.
    """
    base = (token.tag_ or token.pos_ or "").lower()
    if not base or base in _BARE_CLASSES:
        return base
    features = token.morph.to_dict()
    segments = [base]
    for value in (
        _NUMBER.get(features.get("Number", "")),
        _CASE.get(features.get("Case", "")),
        _gender(features),
        _DEGREE.get(features.get("Degree", "")),
    ):
        if value:
            segments.append(value)
    return ":".join(segments)


def _gender(features: dict[str, str]) -> str | None:
    gender = features.get("Gender", "")
    if gender == "Masc":
        return _MASCULINE_ANIMACY.get(features.get("Animacy", ""), "m3")
    return _GENDER.get(gender)


def load_polish_stemmer(settings: Settings) -> Stemmer:
    if settings.stemmer == "spacy":
        return SpacyPolishStemmer(model_name=settings.spacy_model)
    return LexiconStemmer(settings.lexicon_path)
