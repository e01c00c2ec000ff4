"""
API routes package
"""

from fastapi import APIRouter
from .search import router as search_router
from .routes import router as routes_router
from .reference import router as reference_router

api_router = APIRouter()
api_router.include_router(search_router)
api_router.include_router(routes_router)
api_router.include_router(reference_router)

__all__ = ['api_router']
