from datetime import datetime, timezone

from fastapi import APIRouter
from sqlalchemy import text

from catalog.config import settings
from catalog.db import engine

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    """Liveness probe. Always 200 while the process is up; ``database`` reports connectivity."""
    db_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except Exception:
        db_ok = False

    return {
        "status": "Healthy",
        "service": settings.SERVICE_NAME,
        "database": db_ok,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
