"""
Health check endpoints.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Depends, status
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobportal.core.database import Base, get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    """
    return {"status": "healthy", "timestamp": _timestamp()}


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Health check including database connectivity and the schema the listing
    endpoints depend on.
    """
    checks: Dict[str, Any] = {}

    try:
        db.execute(text("SELECT 1"))
        missing = sorted(set(Base.metadata.tables) - set(inspect(db.get_bind()).get_table_names()))
        checks["database"] = {
            "status": "healthy" if not missing else "degraded",
            "dialect": db.get_bind().dialect.name,
            "missing_tables": missing,
        }
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        checks["database"] = {"status": "unhealthy", "message": f"Database error: {e}"}

    overall = "healthy" if all(check["status"] == "healthy" for check in checks.values()) else "unhealthy"
    return {"status": overall, "timestamp": _timestamp(), "checks": checks}
