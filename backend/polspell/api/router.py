from fastapi import APIRouter

from polspell.api.routes.root import router as root_router
from polspell.api.routes.spelling import router as spelling_router
from polspell.api.routes.tagging import router as tagging_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(spelling_router)
api_router.include_router(tagging_router)
