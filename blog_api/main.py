"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from blog_api.api import articles, auth
from blog_api.api.errors import register_exception_handlers
from blog_api.config import get_settings
from blog_api.database import check_db_connected, engine, get_db
from blog_api.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting blog API (environment: {settings.environment})")
    yield
    engine.dispose()
    logger.info("Database pool closed")


app = FastAPI(
    title="Blog API",
    description="Articles with email/password and OAuth authentication",
    version="0.1.0",
    lifespan=lifespan,
)

origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # Browsers reject credentials with a wildcard origin
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(articles.router, prefix=settings.api_prefix)


@app.get("/health")
def health_check(db: Annotated[Session, Depends(get_db)]):
    """Health check endpoint; verifies the database is reachable."""
    timestamp = datetime.now(UTC).isoformat()
    if not check_db_connected(db):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "success": False,
                "message": "Database connection failed",
                "timestamp": timestamp,
            },
        )
    return {"success": True, "message": "Server is healthy", "timestamp": timestamp}
