# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the TreeTracker capture API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import settings
from app.exceptions import (
    TreeTrackerException,
    treetracker_exception_handler,
    validation_exception_handler,
)
from app.routers import health, trees
from core.database import init_db

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup creates missing tables; there is nothing to release on shutdown.
    """
    logger.info(f"Starting TreeTracker API in {settings.ENVIRONMENT} mode")
    logger.info(f"Photos are stored in: {settings.DOCUMENT_STORE}")

    if not init_db():
        logger.warning("Database tables could not be verified")

    yield

    logger.info("Shutting down TreeTracker API")


# Create FastAPI application
app = FastAPI(
    title="TreeTracker API",
    description="""
## Tree Capture API

Saves tree captures for verified planters. Each capture stores a photo and
the GPS fix it was taken at, attributed to the planter's latest
identification.

### Quick Start

```bash
curl -X POST http://localhost:8000/api/v1/planters/{identifier}/trees \\
  -F "photo=@tree.png;type=image/png" \\
  -F "latitude=1.0" -F "longitude=2.0" -F "horizontal_accuracy=5.0"
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Trees",
            "description": "Capture trees for planters",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TreeTrackerException)
async def handle_treetracker_exception(request: Request, exc: TreeTrackerException):
    """Handle custom TreeTracker exceptions."""
    return await treetracker_exception_handler(request, exc)


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    """Handle pydantic errors raised while building capture input."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Tree capture endpoints
app.include_router(
    trees.router,
    prefix="/api/v1/planters",
    tags=["Trees"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "TreeTracker API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
