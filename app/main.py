# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Food Reviews API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app import __version__
from app.config import settings
from app.exceptions import (
    FoodReviewsException,
    database_exception_handler,
    food_reviews_exception_handler,
    validation_exception_handler,
)
from app.routers import comments, health, reviews
from app.auth import routes as auth_routes
from lib.mongo_client import MongoDatabase

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

    Runs on startup and shutdown:
    - Startup: Connect to MongoDB and ensure indexes
    - Shutdown: Close the MongoDB client
    """
    logger.info(f"Starting Food Reviews API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    MongoDatabase.ensure_indexes(MongoDatabase.get_database())

    yield

    logger.info("Shutting down Food Reviews API")
    MongoDatabase.close()


# Create FastAPI application
app = FastAPI(
    title="Food Reviews API",
    description="""
## Food reviews with comments

Post reviews of dishes, rate them from 0 to 10, and discuss them in comments.

### Quick Start

```bash
# 1. Create a review
curl -X POST http://localhost:3000/reviews \\
  -H "Content-Type: application/json" \\
  -d '{"title": "Good steak", "food": "Ribeye", "content": "Nice", "rating": 9}'

# 2. Find well-rated steak reviews
curl "http://localhost:3000/reviews?title=steak&min_rating=8"

# 3. Comment on it
curl -X POST http://localhost:3000/reviews/{id}/comments \\
  -H "Content-Type: application/json" \\
  -d '{"content": "Agreed!", "nickname": "meatlover"}'

# 4. Register, log in and read your profile
curl -X POST http://localhost:3000/users -d '{"email": "jane@example.com", "password": "..."}'
curl -X POST http://localhost:3000/login -d '{"email": "jane@example.com", "password": "..."}'
curl http://localhost:3000/user/{id} -H "Authorization: Bearer <accessToken>"
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Reviews",
            "description": "Create, list, update and delete food reviews",
        },
        {
            "name": "Comments",
            "description": "Edit and delete comments on reviews",
        },
        {
            "name": "Auth",
            "description": "Accounts, login and bearer-token protected profile",
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

@app.exception_handler(FoodReviewsException)
async def handle_food_reviews_exception(request: Request, exc: FoodReviewsException):
    """Handle custom Food Reviews exceptions."""
    return await food_reviews_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle invalid request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(PyMongoError)
async def handle_database_exception(request: Request, exc: PyMongoError):
    """Handle datastore failures."""
    return await database_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Review endpoints
app.include_router(
    reviews.router,
    prefix="/reviews",
    tags=["Reviews"]
)

# Comment endpoints
app.include_router(
    comments.router,
    prefix="/comments",
    tags=["Comments"]
)

# Account and login endpoints
app.include_router(
    auth_routes.router,
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
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
        "name": "Food Reviews API",
        "version": __version__,
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
