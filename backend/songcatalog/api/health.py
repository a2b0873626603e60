"""Health check endpoints for monitoring and load balancers."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from songcatalog.config import Settings, get_settings
from songcatalog.database import get_db
from songcatalog import __version__


router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Health check endpoint for load balancers and monitoring.

    Returns status of all critical dependencies.
    """
    status = {
        "status": "healthy",
        "version": __version__,
        "checks": {}
    }

    # Database check
    try:
        db.execute(text("SELECT 1"))
        status["checks"]["database"] = "ok"
    except SQLAlchemyError as e:
        status["checks"]["database"] = f"error: {e.__class__.__name__}"
        status["status"] = "unhealthy"

    # Song creation needs the music info API
    if settings.music_api_url:
        status["checks"]["music_api"] = "configured"
    else:
        status["checks"]["music_api"] = "not configured"
        status["status"] = "degraded" if status["status"] == "healthy" else status["status"]

    return status


@router.get("/ready")
def readiness_check(db: Session = Depends(get_db)):
    """
    Readiness check - is the service ready to handle requests?

    Used by Kubernetes/orchestrators to determine if traffic can be routed.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"ready": True}
    except SQLAlchemyError:
        return {"ready": False}


@router.get("/live")
def liveness_check():
    """
    Liveness check - is the process alive?

    Simple check that the application is running.
    """
    return {"alive": True, "version": __version__}
