from fastapi import APIRouter

from .features.uploads.router import router as uploads_router

router = APIRouter()

router.include_router(uploads_router)
