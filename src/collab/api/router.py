"""Master API router mounted at /api."""

from fastapi import APIRouter

from collab.api.routes import health, projects

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(projects.router)
