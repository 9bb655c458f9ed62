from fastapi import APIRouter

from .features.convert_to_event.router import router as convert_to_event_router
from .features.manage_polls.router import router as manage_polls_router
from .features.vote.router import router as vote_router

router = APIRouter()

router.include_router(manage_polls_router)
router.include_router(vote_router)
router.include_router(convert_to_event_router)
