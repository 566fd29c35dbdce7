"""
FastAPI Application: Hexagonal Architecture
Main entry point for the M-Pesa Statement Importer API
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from api.v1.routes import health, mpesa
from api.v1.routes.health import SERVICE_VERSION
from api.v1.dependencies import get_transaction_store, close_transaction_store
from config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="M-Pesa Statement Importer API",
    description="Import M-Pesa PDF statements into personal finance transactions",
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Initialize transaction store on startup"""
    try:
        store = await get_transaction_store()
        healthy = await store.health_check()
        logger.info("Transaction store connected: %s", healthy)
    except Exception as e:
        logger.warning("Transaction store connection failed: %s", e)
        logger.warning("API will start but import requests will fail")


@app.on_event("shutdown")
async def shutdown_event():
    """Close transaction store on shutdown"""
    await close_transaction_store()
    logger.info("Transaction store closed")


# Include routers
app.include_router(health.router, prefix="/api/v1", tags=["Health"])
app.include_router(mpesa.router, prefix="/api/v1", tags=["M-Pesa"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "M-Pesa Statement Importer API",
        "version": SERVICE_VERSION,
        "architecture": "Hexagonal (Ports & Adapters)",
        "docs": "/docs",
        "health": "/api/v1/health"
    }


if __name__ == "__main__":
    # Run with uvicorn
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
