"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app import __version__
from app.config import settings
from app.logger import setup_logging
from app.routers import proxy_router


setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting Gemini Proxy v{__version__}")
    logger.info(f"Server running on {settings.host}:{settings.port}")
    logger.info(f"Proxy: {settings.proxy or 'None'}")
    logger.info(f"Timeout: {settings.timeout or 'transport default'}")
    logger.info(f"Models: {settings.fast_model} -> {settings.strong_model}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; requests will fail until it is")

    yield

    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Gemini Proxy",
    description="Forwards questions to Gemini, falling back from the flash to the pro model",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(proxy_router, tags=["Proxy"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint for health check."""
    return {
        "service": "Gemini Proxy",
        "version": __version__,
        "status": "healthy",
    }


@app.get("/health", tags=["Health"])
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
