"""
NBP Rates Proxy — FastAPI application entry point.

Configures the app, middleware, error handlers and registers the API routers.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api import buy_and_sell, exchange
from app.api.error_handlers import register_error_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

VERSION = "0.1.0"

app = FastAPI(
    title=settings.APP_NAME,
    description="Exchange rate analytics over the National Bank of Poland API.",
    version=VERSION,
    debug=settings.DEBUG,
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error handlers ---
register_error_handlers(app)

# --- Routers ---
app.include_router(exchange.router, prefix="/api/exchange", tags=["Exchange"])
app.include_router(buy_and_sell.router, prefix="/api/buy-and-sell", tags=["Buy and sell"])


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": VERSION,
    }
