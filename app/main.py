# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the GlobalMart site backend.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Requests under /api/ go to the JSON API routers; everything else goes to
# the page router.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    SiteException,
    http_exception_handler,
    site_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.pages import router as pages
from app.routers import health, images, site_settings

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

    Logs the effective configuration on startup. There are no background
    tasks and no connections to close: store clients are created lazily.
    """
    logger.info(f"Starting GlobalMart site in {settings.ENVIRONMENT} mode")
    logger.info(f"Storage backend: {settings.STORAGE_BACKEND}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down GlobalMart site")


# Create FastAPI application
app = FastAPI(
    title="GlobalMart Site API",
    description="""
## B2B Product Exhibition Backend

Site settings, product image uploads, and the server-rendered marketing pages.

### Quick Start

```bash
# Read settings
curl http://localhost:8000/api/settings

# Save settings
curl -X POST http://localhost:8000/api/settings \\
  -H "Content-Type: application/json" \\
  -d '{"site_name": "Acme", "email": "sales@acme.com"}'

# Upload an image
curl -X POST http://localhost:8000/api/upload/image -F "file=@photo.png"
```
""",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Settings",
            "description": "Site name, description, contact details and social links",
        },
        {
            "name": "Upload",
            "description": "Upload and serve product images",
        },
        {
            "name": "Health",
            "description": "API health check",
        },
    ],
)

# Paths match exactly: "/about/" is a 404, not a redirect to "/about"
app.router.redirect_slashes = False


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(SiteException, site_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Health check endpoint
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Site settings endpoints
app.include_router(
    site_settings.router,
    prefix="/api/settings",
    tags=["Settings"]
)

# Image upload endpoints
app.include_router(
    images.router,
    prefix="/api/upload",
    tags=["Upload"]
)

# HTML pages (mounted last: /products/{id} and /images/{path} are catch-alls)
app.include_router(pages.router)
