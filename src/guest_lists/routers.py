from fastapi import APIRouter

from .features.invite_to_event.router import router as invite_to_event_router
from .features.manage_guest_lists.router import router as manage_guest_lists_router

router = APIRouter()

router.include_router(manage_guest_lists_router)
router.include_router(invite_to_event_router)
