"""
FastAPI main application with DDD architecture
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .core.config import settings
from .core.logging import configure_logging
from .api.errors import register_exception_handlers
from .api.middleware import RequestContextMiddleware
from .api.router import api_router
from .db.database import SessionLocal
from .infrastructure.cache.redis_client import RedisCacheClient

# Import all ORM models to ensure relationships are resolved
from .infrastructure import orm  # noqa: F401

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting %s %s (%s)", settings.PROJECT_NAME, settings.VERSION, settings.ENVIRONMENT)
    cache = RedisCacheClient.from_url(settings.REDIS_URL)
    app.state.cache = cache
    yield
    logger.info("Shutting down %s", settings.PROJECT_NAME)
    await cache.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": f"{settings.PROJECT_NAME} API", "version": settings.VERSION}


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint that verifies database and cache connectivity"""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        db_status = "unhealthy"
    finally:
        db.close()

    cache = getattr(request.app.state, "cache", None)
    cache_status = "not_configured"
    if isinstance(cache, RedisCacheClient):
        try:
            await cache.ping()
            cache_status = "healthy"
        except RedisError:
            logger.exception("Redis health check failed")
            cache_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "redis": cache_status,
        "version": settings.VERSION,
    }


if __name__ == "__main__":
    uvicorn.run(
        "biteback.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
