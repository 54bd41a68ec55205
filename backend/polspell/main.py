from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from polspell.api.router import api_router
from polspell.core.config import Settings, load_settings
from polspell.core.logging import configure_logging
from polspell.nlp.adapter import Stemmer
from polspell.nlp.tagger import DualCaseTagger
from polspell.services.spelling.compounds import CompoundAnalyzer
from polspell.services.spelling.prefixes import load_prefix_set
from polspell.services.spelling.speller import DictionarySpeller
from polspell.services.spelling.speller_rule import SpellerRule

logger = logging.getLogger(__name__)


def _default_stemmer_factory(settings: Settings) -> Stemmer:
    # Import lazily so a missing spaCy model degrades health instead of crashing import.
    from polspell.nlp.polish import load_polish_stemmer

    return load_polish_stemmer(settings)


def create_app(
    settings: Settings | None = None,
    stemmer_factory: Callable[[Settings], Stemmer] = _default_stemmer_factory,
) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        tagger: DualCaseTagger | None = None
        try:
            tagger = DualCaseTagger(stemmer_factory(app_settings), locale=app_settings.locale)
            app.state.tagger_ready = True
            app.state.tagger_error = None
        except Exception as exc:
            app.state.tagger_ready = False
            app.state.tagger_error = str(exc)
            logger.exception(
                "backend_tagger_startup_failed",
                extra={"stemmer": app_settings.stemmer, "lexicon_path": str(app_settings.lexicon_path)},
            )
        app.state.tagger = tagger

        speller: DictionarySpeller | None = None
        try:
            prefixes = load_prefix_set(app_settings.prefixes_path, locale=app_settings.locale)
            speller = DictionarySpeller(
                dictionary_paths=app_settings.dictionary_paths,
                max_edit_distance=app_settings.max_edit_distance,
                max_suggestions=app_settings.max_suggestions,
                ignore_numbers=app_settings.ignore_numbers,
                ignore_all_uppercase=app_settings.ignore_all_uppercase,
                ignore_camel_case=app_settings.ignore_camel_case,
            )
            app.state.speller_ready = True
            app.state.speller_error = None
        except Exception as exc:
            app.state.speller_ready = False
            app.state.speller_error = str(exc)
            logger.exception(
                "backend_speller_startup_failed",
                extra={"dictionary_paths": [str(path) for path in app_settings.dictionary_paths]},
            )

        # Compound analysis needs the tagger, so the rule exists only when both loaded.
        if speller is not None and tagger is not None:
            app.state.speller_rule = SpellerRule(
                speller=speller,
                compounds=CompoundAnalyzer(speller=speller, provider=tagger, prefixes=prefixes),
                locale=app_settings.locale,
            )

        startup_status = "ok" if app.state.speller_ready and app.state.tagger_ready else "degraded"
        logger.info(
            "backend_startup",
            extra={
                "status": startup_status,
                "environment": app_settings.environment,
                "host": app_settings.host,
                "port": app_settings.port,
                "locale": app_settings.locale,
                "speller_error": app.state.speller_error,
                "tagger_error": app.state.tagger_error,
                "speller": speller.metadata() if speller else None,
                "tagger": tagger.metadata() if tagger else None,
            },
        )
        yield

    app = FastAPI(title="Polspell Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.speller_ready = False
    app.state.speller_error = None
    app.state.tagger_ready = False
    app.state.tagger_error = None
    app.state.tagger = None
    app.state.speller_rule = None
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
