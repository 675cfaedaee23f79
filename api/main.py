"""
Event Sales Tracker API - Main Application.

FastAPI application exposing events, sales and payments under /api/v1 and
live sale updates over WebSocket at /ws/days/{event_day_id}.

Environment:
    LOG_LEVEL           Root log level (default INFO)
    CORS_ALLOW_ORIGINS  Comma-separated origins (default "*")
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def _cors_origins():
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# Create FastAPI application
app = FastAPI(
    title="Event Sales Tracker API",
    description="REST API for recording sales and payments at multi-day selling events",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "event-sales-tracker-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Event Sales Tracker API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api import realtime
from api.routers import events, payments, products, sales

app.include_router(events.router, prefix="/api/v1", tags=["Events"])
app.include_router(products.router, prefix="/api/v1", tags=["Products"])
app.include_router(sales.router, prefix="/api/v1", tags=["Sales"])
app.include_router(payments.router, prefix="/api/v1", tags=["Payments"])
app.include_router(realtime.router, tags=["Realtime"])
