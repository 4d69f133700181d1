"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from venuebook.api import auth, bookings, fields, venues
from venuebook.core.config import settings
from venuebook.core.database import engine, init_db
from venuebook.core.errors import register_exception_handlers

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Venue Booking API")
    logger.info(f"Debug mode: {settings.DEBUG}")

    await init_db()

    yield

    # Shutdown
    logger.info("Shutting down Venue Booking API")
    await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title="Venue Booking API",
    description="Register, verify by OTP, manage venues and fields, and book play time",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(venues.router, prefix=settings.API_PREFIX)
app.include_router(fields.router, prefix=settings.API_PREFIX)
app.include_router(bookings.router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
