"""Main FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from curl_cffi.requests import AsyncSession
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from gemini_studio import __version__
from gemini_studio.config import Settings, settings
from gemini_studio.routers import images_router
from gemini_studio.services.client import GeminiImageClient


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to stdout."""
    logger.remove()
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Create the application around the given settings."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting Gemini Studio v{__version__}")
        logger.info(f"Model: {app_settings.gemini_model}")
        logger.info(f"Proxy: {app_settings.proxy or 'None'}")
        logger.info(f"Timeout: {app_settings.timeout}s")
        if not app_settings.is_configured:
            logger.error(
                "Gemini API key is missing or invalid. Please set GEMINI_API_KEY in your .env file."
            )

        session = AsyncSession()
        app.state.client = GeminiImageClient.from_session(session, app_settings)

        yield

        logger.info("Shutting down...")
        await session.close()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Gemini Studio",
        description="Backend proxy for Gemini image generation, editing and segmentation",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(images_router, tags=["Images"])

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint for health check."""
        return {
            "service": "Gemini Studio",
            "version": __version__,
            "status": "healthy",
            "configured": app_settings.is_configured,
        }

    @app.get("/health", tags=["Health"])
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


configure_logging(settings.log_level)
app = create_app()


def run():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "gemini_studio.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
