from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from polspell.api.schemas.v1.tagging import TagRequest, TagResponse
from polspell.core.errors import ResourceUnavailableError
from polspell.services.use_cases.tagging import TaggingUseCase

router = APIRouter(prefix="/tagging")
logger = logging.getLogger(__name__)


@router.post("/tag", response_model=TagResponse)
def tag_tokens(payload: TagRequest, request: Request) -> TagResponse:
    tagger = getattr(request.app.state, "tagger", None)
    if tagger is None:
        raise HTTPException(
            status_code=503,
            detail="Tagger unavailable. Check backend logs and lexicon configuration.",
        )
    try:
        return TaggingUseCase(tagger).execute(payload.tokens)
    except ResourceUnavailableError as exc:
        logger.exception("tagging_resource_unavailable", extra={"resource": exc.resource})
        raise HTTPException(status_code=503, detail=f"Resource unavailable: {exc}") from exc
