"""
Web Routes for FastAPI
"""
from fastapi import APIRouter
from datetime import datetime, timezone

from core.schemas import HealthSchema
from .pages import pages_router
from .oauth import oauth_router

# Create routers
health_router = APIRouter()

# Health check endpoints
@health_router.get("/health", response_model=HealthSchema)
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "oauth2-client"
    }
