"""Operational probes, mounted at the root rather than under the API prefix."""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hrms.core.config import settings
from hrms.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/")
def root():
    return {"message": f"{settings.app_name} is running", "version": settings.version, "docs": "/docs"}


@router.get("/health")
def health_check():
    return {
        "status": "up",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version,
        "environment": settings.environment,
    }


@router.get("/liveness")
def liveness_check():
    return health_check()


@router.get("/readiness")
def readiness_check(db: Session = Depends(get_db)):
    """Ready once the database answers."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Readiness check failed: {e}")
        raise HTTPException(status_code=503, detail="Service not ready")
    return {"status": "ready", "components": {"database": "connected"}}
