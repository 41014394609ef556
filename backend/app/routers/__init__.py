"""Municipal Draft Engine - API Routers"""
from .drafts import router as drafts_router

__all__ = [
    "drafts_router",
]
