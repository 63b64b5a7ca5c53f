"""
Routers package initialization
"""

from .health import router as health_router
from .summarize import router as summarize_router

__all__ = [
    "health_router",
    "summarize_router"
]
