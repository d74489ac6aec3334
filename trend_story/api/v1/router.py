from fastapi import APIRouter

from .endpoints import health, trends

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(trends.router, tags=["trends"])
