from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal
import os


BASE_DIR = Path(__file__).resolve().parents[2]
RESOURCES_DIR = BASE_DIR / "resources" / "dictionaries"
DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:4173", "http://localhost:4173")
DEFAULT_DICTIONARY_PATHS = (RESOURCES_DIR / "pl_words.txt",)
DEFAULT_LEXICON_PATH = RESOURCES_DIR / "pl_lexicon.tsv"

StemmerBackend = Literal["lexicon", "spacy"]


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    locale: str = "pl_PL"
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    dictionary_paths: tuple[Path, ...] = DEFAULT_DICTIONARY_PATHS
    lexicon_path: Path = DEFAULT_LEXICON_PATH
    prefixes_path: Path | None = None
    stemmer: StemmerBackend = "lexicon"
    spacy_model: str = "pl_core_news_sm"
    max_edit_distance: int = 2
    max_suggestions: int = 10
    ignore_numbers: bool = True
    ignore_all_uppercase: bool = False
    ignore_camel_case: bool = False
    log_level: str = "INFO"


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() not in {"0", "false", "no"}


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def load_settings() -> Settings:
    parsed_cors_origins = _split_csv(os.getenv("POLSPELL_CORS_ORIGINS", ""))
    dictionary_paths = tuple(Path(item) for item in _split_csv(os.getenv("POLSPELL_DICTIONARY_PATHS", "")))
    stemmer = os.getenv("POLSPELL_STEMMER", "lexicon").strip().lower()
    if stemmer not in {"lexicon", "spacy"}:
        raise ValueError(f"Unsupported stemmer backend: {stemmer}")
    return Settings(
        environment=os.getenv("POLSPELL_ENV", "development"),
        app_name=os.getenv("POLSPELL_APP_NAME", "polspell-backend"),
        host=os.getenv("POLSPELL_HOST", "127.0.0.1"),
        port=int(os.getenv("POLSPELL_PORT", "8000")),
        locale=os.getenv("POLSPELL_LOCALE", "pl_PL"),
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
        dictionary_paths=dictionary_paths or DEFAULT_DICTIONARY_PATHS,
        lexicon_path=Path(os.getenv("POLSPELL_LEXICON_PATH", str(DEFAULT_LEXICON_PATH))),
        prefixes_path=Path(os.getenv("POLSPELL_PREFIXES_PATH"))
        if os.getenv("POLSPELL_PREFIXES_PATH")
        else None,
        stemmer=stemmer,
        spacy_model=os.getenv("POLSPELL_SPACY_MODEL", "pl_core_news_sm"),
        max_edit_distance=int(os.getenv("POLSPELL_MAX_EDIT_DISTANCE", "2")),
        max_suggestions=int(os.getenv("POLSPELL_MAX_SUGGESTIONS", "10")),
        ignore_numbers=_flag("POLSPELL_IGNORE_NUMBERS", "1"),
        ignore_all_uppercase=_flag("POLSPELL_IGNORE_ALL_UPPERCASE", "0"),
        ignore_camel_case=_flag("POLSPELL_IGNORE_CAMEL_CASE", "0"),
        log_level=os.getenv("POLSPELL_LOG_LEVEL", "INFO").upper(),
    )
