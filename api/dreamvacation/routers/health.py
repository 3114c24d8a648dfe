"""
Health Check Endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text

from dreamvacation.utils.database import get_db
from dreamvacation.schemas.destination import MessageResponse

router = APIRouter()

API_MESSAGE = "Dream Vacation API is running!"


@router.get("/", response_model=MessageResponse)
async def root():
    """Static API information, no store access"""
    return {"message": API_MESSAGE}


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": "dreamvacation-api"}


@router.get("/health/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """
    Readiness check - verifies the database is reachable
    """
    checks = {"database": False}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = True
    except Exception as e:
        checks["database_error"] = str(e)

    return {
        "status": "ready" if checks["database"] else "degraded",
        "checks": checks
    }
