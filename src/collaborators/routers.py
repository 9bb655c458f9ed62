from fastapi import APIRouter

from .features.manage_collaborators.router import router as manage_collaborators_router

router = APIRouter()

router.include_router(manage_collaborators_router)
