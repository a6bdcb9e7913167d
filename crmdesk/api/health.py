"""Health check endpoints for monitoring."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import get_db_session

router = APIRouter()


@router.get("")
async def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db_session)):
    """Ready when the database answers."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return JSONResponse(
            status_code=503, content={"status": "unavailable", "database": str(e)}
        )
    return {"status": "ready", "database": "ok"}
