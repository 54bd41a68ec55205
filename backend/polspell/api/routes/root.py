from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "polspell backend"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    speller_ready = bool(getattr(request.app.state, "speller_ready", False))
    tagger_ready = bool(getattr(request.app.state, "tagger_ready", False))
    status = "ok" if speller_ready and tagger_ready else "degraded"
    payload: dict[str, object] = {
        "status": status,
        "service": "backend",
        "components": {
            "speller": "ok" if speller_ready else "degraded",
            "tagger": "ok" if tagger_ready else "degraded",
        },
    }

    speller_error = getattr(request.app.state, "speller_error", None)
    tagger_error = getattr(request.app.state, "tagger_error", None)
    if speller_error:
        payload["speller_error"] = str(speller_error)
    if tagger_error:
        payload["tagger_error"] = str(tagger_error)

    return payload
