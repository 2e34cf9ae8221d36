"""API v1 router aggregator."""

from fastapi import APIRouter

from libboard.api.v1.endpoints import boards, comments, files

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(boards.router)
api_router.include_router(comments.router)
api_router.include_router(files.router)

__all__ = ["api_router"]
