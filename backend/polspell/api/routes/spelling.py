from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from polspell.api.schemas.v1.spelling import (
    CompoundRequest,
    CompoundResponse,
    SpellingCheckRequest,
    SpellingCheckResponse,
)
from polspell.core.errors import ResourceUnavailableError
from polspell.services.use_cases.spelling import SpellingCheckUseCase

router = APIRouter(prefix="/spelling")
logger = logging.getLogger(__name__)


def _use_case(request: Request) -> SpellingCheckUseCase:
    rule = getattr(request.app.state, "speller_rule", None)
    if rule is None:
        raise HTTPException(
            status_code=503,
            detail="Speller unavailable. Check backend logs and dictionary configuration.",
        )
    return SpellingCheckUseCase(rule)


@router.post("/check", response_model=SpellingCheckResponse)
def check_tokens(payload: SpellingCheckRequest, request: Request) -> SpellingCheckResponse:
    use_case = _use_case(request)
    try:
        return use_case.execute(payload.tokens)
    except ResourceUnavailableError as exc:
        logger.exception("spelling_check_resource_unavailable", extra={"resource": exc.resource})
        raise HTTPException(status_code=503, detail=f"Resource unavailable: {exc}") from exc


@router.post("/compound", response_model=CompoundResponse)
def explain_compound(payload: CompoundRequest, request: Request) -> CompoundResponse:
    use_case = _use_case(request)
    try:
        return use_case.explain_compound(payload.word)
    except ResourceUnavailableError as exc:
        logger.exception("compound_resource_unavailable", extra={"resource": exc.resource})
        raise HTTPException(status_code=503, detail=f"Resource unavailable: {exc}") from exc
