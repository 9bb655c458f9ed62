from fastapi import APIRouter

from .features.cancel_event.router import router as cancel_event_router
from .features.manage_events.router import router as manage_events_router
from .features.messages.router import router as messages_router

router = APIRouter()

router.include_router(manage_events_router)
router.include_router(cancel_event_router)
router.include_router(messages_router)
