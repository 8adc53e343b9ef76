# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the blog API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import settings
from app.dependencies import get_store
from app.exceptions import (
    BlogApiException,
    blog_api_exception_handler,
    validation_exception_handler,
)
from app.routers import authors, blogposts, health

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

    - Startup: log configuration
    - Shutdown: close the document store
    """
    logger.info(f"Starting blog API in {settings.ENVIRONMENT} mode")
    logger.info(f"Document store backend: {settings.STORE_BACKEND}")

    yield

    logger.info("Shutting down blog API")
    store = app.dependency_overrides.get(get_store, get_store)()
    store.close()


# Create FastAPI application
app = FastAPI(
    title="Blog API",
    description="""
## Authors and Blog Posts

CRUD over two related resources. Every blog post references one author;
reads embed the author's display name, deleting an author deletes its posts.

| Resource | Endpoints |
|----------|-----------|
| Authors | `GET /authors`, `POST /authors`, `PUT /authors/{id}`, `DELETE /authors/{id}` |
| Blog posts | `GET /blogposts`, `GET /blogposts/{id}`, `POST /blogposts`, `PUT /blogposts/{id}`, `DELETE /blogposts/{id}` |
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Authors",
            "description": "Create, list, update and delete authors",
        },
        {
            "name": "Blog Posts",
            "description": "Create, read, update and delete blog posts",
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

# CORS middleware - allows cross-origin requests
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

@app.exception_handler(BlogApiException)
async def handle_blog_api_exception(request: Request, exc: BlogApiException):
    """Handle custom blog API exceptions."""
    return await blog_api_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(ValidationError)
async def handle_model_validation_error(request: Request, exc: ValidationError):
    """Handle payloads that fail model validation inside the services."""
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
    tags=["Health"]
)

# Author endpoints
app.include_router(
    authors.router,
    prefix="/authors",
    tags=["Authors"]
)

# Blog post endpoints
app.include_router(
    blogposts.router,
    prefix="/blogposts",
    tags=["Blog Posts"]
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
        "name": "Blog API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
