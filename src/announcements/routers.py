from fastapi import APIRouter

from .features.manage_announcements.router import router as manage_announcements_router

router = APIRouter()

router.include_router(manage_announcements_router)
