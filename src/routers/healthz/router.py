import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text

from src.config.database import async_session_manager

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "0.1.0"


class HealthCheckResponse(BaseModel):
    status: str
    version: str = API_VERSION
    database: str = "ok"


async def database_reachable() -> bool:
    try:
        async with async_session_manager(auto_commit=False) as session:
            await session.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Health check could not reach the database")
        return False
    return True


@router.get("/", response_model=HealthCheckResponse)
async def health_check():
    """
    Liveness and database readiness in one probe.
    Answers 503 when the database cannot be queried.
    """
    if not await database_reachable():
        body = HealthCheckResponse(status="unhealthy", database="unreachable")
        return JSONResponse(status_code=503, content=body.model_dump())
    return HealthCheckResponse(status="healthy")
