# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the FoodShare API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    FoodShareException,
    foodshare_exception_handler,
    general_exception_handler,
    http_exception_handler,
    supabase_client_exception_handler,
    validation_exception_handler,
)
from app.routers import donations, health, stats
from app.auth import routes as auth_routes
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first request, so startup only
    reports configuration.
    """
    logger.info(f"Starting FoodShare API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list if settings.is_production else ['*']}")

    yield

    logger.info("Shutting down FoodShare API")


# Create FastAPI application
app = FastAPI(
    title="FoodShare API",
    description="""
## Food Donation Marketplace API

Donors post surplus food; receivers claim it.

### How It Works

1. **Register** as a donor or a receiver
2. **Log in** to get a bearer token (valid 24 hours)
3. Donors **post donations**; anyone can **browse** available ones
4. Receivers **claim** a donation; each donation can be claimed once
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Account registration and login",
        },
        {
            "name": "Donations",
            "description": "Post, browse and claim donations",
        },
        {
            "name": "Stats",
            "description": "Dashboard statistics",
        },
        {
            "name": "Health",
            "description": "API and database health",
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


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its status and duration; tag it with an ID."""
    start_time = time.time()
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    try:
        response = await call_next(request)
    except Exception as exc:
        # Unhandled errors reach the server error handler outside this middleware
        response = await general_exception_handler(request, exc)

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({process_time:.3f}s) [{request_id}]"
    )
    response.headers["X-Request-ID"] = request_id
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(FoodShareException, foodshare_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(SupabaseClientError, supabase_client_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Registration and login
app.include_router(
    auth_routes.router,
    prefix="/api",
    tags=["Auth"]
)

# Donation lifecycle endpoints
app.include_router(
    donations.router,
    prefix="/api/donations",
    tags=["Donations"]
)

# Dashboard statistics
app.include_router(
    stats.router,
    prefix="/api",
    tags=["Stats"]
)

# Health check endpoint
app.include_router(
    health.router,
    prefix="/api",
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
        "name": "FoodShare API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on {settings.API_HOST}:{settings.API_PORT}")
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
