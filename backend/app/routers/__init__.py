"""101 Fixes - API Routers"""
from .emails import router as emails_router
from .audit import router as audit_router
from .fixes import router as fixes_router

__all__ = [
    "emails_router",
    "audit_router",
    "fixes_router",
]
