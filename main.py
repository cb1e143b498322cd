import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from jobportal.core.config import settings
from jobportal.core.database import init_db
from jobportal.core.logging_config import NOISY_LOGGERS, setup_logging
from jobportal.api.endpoints import (
    access_requests,
    candidate_profiles,
    candidates,
    employers,
    health,
    job_applications,
    job_categories,
    job_posts,
)

setup_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS,
    service=settings.PROJECT_NAME,
    quiet=() if settings.DB_ECHO else NOISY_LOGGERS,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up Job Portal API...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down Job Portal API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="API for a job portal: employers, candidates, job posts and applications",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(job_categories.router, prefix=settings.API_V1_STR)
app.include_router(employers.router, prefix=settings.API_V1_STR)
app.include_router(candidates.router, prefix=settings.API_V1_STR)
app.include_router(candidate_profiles.education_router, prefix=settings.API_V1_STR)
app.include_router(candidate_profiles.experience_router, prefix=settings.API_V1_STR)
app.include_router(job_posts.router, prefix=settings.API_V1_STR)
app.include_router(job_applications.router, prefix=settings.API_V1_STR)
app.include_router(access_requests.router, prefix=settings.API_V1_STR)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to the Job Portal API",
        "version": "1.0.0",
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
