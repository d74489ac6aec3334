from datetime import datetime, timezone
from typing import Dict, Any

import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text

from ....config import Settings, get_settings
from ....core.database import open_session

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    try:
        db = open_session(settings.database_path)
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        raise HTTPException(status_code=503, detail="Database connectivity failed")

    return {
        "status": "healthy",
        "service": "Trend Story API",
        "version": "0.1.0",
        "database": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
