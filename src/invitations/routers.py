from fastapi import APIRouter

from .features.guest_rsvp.router import router as guest_rsvp_router
from .features.host_invitations.router import router as host_invitations_router
from .features.manage_guests.router import router as manage_guests_router

router = APIRouter()

router.include_router(host_invitations_router)
router.include_router(manage_guests_router)
router.include_router(guest_rsvp_router)
