"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docsummarizer.api.routes import summarize, upload
from docsummarizer.core.config import get_settings
from docsummarizer.core.exceptions import SummarizerError, summarizer_exception_handler
from docsummarizer.services.provider_registry import ProviderRegistry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name}")

    try:
        provider = ProviderRegistry(settings).resolve_active_provider()
        logger.info(f"Active AI provider: {provider.name} ({provider.model})")
    except SummarizerError as e:
        logger.warning(e.message)

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Document summarization and key insight extraction with pluggable LLM providers",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(SummarizerError, summarizer_exception_handler)

    # Register routers
    api_prefix = "/api"
    app.include_router(upload.router, prefix=api_prefix)
    app.include_router(summarize.router, prefix=api_prefix)

    @app.get("/api/health")
    async def health():
        return {"status": "OK", "message": f"{settings.app_name} API is running"}

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": str(exc)},
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "docsummarizer.main:app",
        host="0.0.0.0",
        port=5000,
        reload=get_settings().debug,
    )
