"""API routes."""
from fastapi import APIRouter
from songcatalog.api import songs, health

api_router = APIRouter()

# Songs
api_router.include_router(songs.router, tags=["songs"])

# Health (probes for load balancers and orchestrators)
api_router.include_router(health.router)
