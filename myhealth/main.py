"""
MyHealth FastAPI Backend Application

Main application entry point for the medical chat API: accounts, profile,
chat sessions and history, and analysed report records.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime

from myhealth.core.config import settings
from myhealth.core.database import init_db
from myhealth.api import router
from myhealth.schemas.common import HealthCheck, ErrorResponse

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="FastAPI backend for the MyHealth AI medical chat assistant",
    version=settings.app_version,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routes
app.include_router(router, prefix="/api")


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Persistence failures become a 500; the raw message only in debug."""
    logger.error(
        f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=True
    )
    detail = str(exc) if settings.debug else "Internal storage error"
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(detail=detail, status_code=500).model_dump(),
    )


@app.get("/", tags=["root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
        "api": "/api",
    }


@app.get("/health", response_model=HealthCheck, tags=["health"])
async def health_check():
    """Health check endpoint."""
    return HealthCheck(
        status="healthy", version=settings.app_version, timestamp=datetime.now()
    )


# Startup event
@app.on_event("startup")
async def startup_event():
    """Actions to perform on application startup."""
    init_db()
    if settings.jwt_secret == "super-secret-key":
        logger.warning("JWT_SECRET is not set; using the built-in development secret")
    logger.info(f"{settings.app_name} v{settings.app_version}")
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    logger.info(f"API Documentation: http://{settings.host}:{settings.port}/docs")


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Actions to perform on application shutdown."""
    logger.info(f"Shutting down {settings.app_name}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "myhealth.main:app", host=settings.host, port=settings.port, reload=settings.debug
    )
