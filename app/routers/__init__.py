"""API routers."""

from .proxy import router as proxy_router

__all__ = ["proxy_router"]
