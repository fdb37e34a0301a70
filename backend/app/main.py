"""
101 Fixes - FastAPI Application

Main entry point for the 101 Fixes backend.

Architecture:
- Access Store: subscriber access and audit applications (SQLAlchemy)
- Access Gate: email-gated entry, driven by the visitor client
- Catalog Engine: fixed 101-entry catalog, filtering and local progress
"""
from contextlib import asynccontextmanager
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .routers import emails_router, audit_router, fixes_router
from .database import init_db

VERSION = "1.0.0"

# Comma-separated list of allowed origins
CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# Marketing site the bare domain forwards to, if any
SITE_URL = os.getenv("SITE_URL", "")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    init_db()
    yield

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="101 Fixes",
    description="""
    101 Fixes - Ecommerce Fixes Catalog and Lead Capture

    Backs the "101 Fixes" landing page: email-gated access to a catalog of
    ecommerce fixes, and free audit applications.

    ## Endpoints
    1. **Emails**: subscribe for access, check access, watch access live
    2. **Audit**: submit a free audit application
    3. **Fixes**: browse and filter the catalog

    ## Key Principles
    - Subscribing is idempotent per email
    - Progress on fixes is stored on the visitor's device, never here
    - The catalog is fixed reference data
    """,
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(emails_router)
app.include_router(audit_router)
app.include_router(fixes_router)


@app.get("/")
async def root():
    """Forward to the marketing site when configured, otherwise API information."""
    if SITE_URL:
        return RedirectResponse(SITE_URL, status_code=302)
    return {
        "name": "101 Fixes",
        "version": VERSION,
        "description": "Ecommerce fixes catalog and lead capture",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


# For running with: python -m app.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
