from fastapi import APIRouter

from .features.manage_event_groups.router import router as manage_event_groups_router

router = APIRouter()

router.include_router(manage_event_groups_router)
