"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from microblog.api import auth, microposts, relationships, sessions, users
from microblog.config import get_settings
from microblog.exceptions import SignInRequired, sign_in_required_handler

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting microblog ({settings.environment})")
    yield


app = FastAPI(
    title="Microblog API",
    description="Microposts, follows and a status feed",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_exception_handler(SignInRequired, sign_in_required_handler)

# Register routers
app.include_router(auth.router)
app.include_router(sessions.router)
app.include_router(users.router)
app.include_router(microposts.router)
app.include_router(relationships.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
