from fastapi import APIRouter

from .features.auth.router import router as auth_router
from .features.host_profile.router import router as host_profile_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(host_profile_router)
