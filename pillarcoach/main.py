"""
PillarCoach HTTP service.

Wires the coaching routes and health checks onto one FastAPI app.

    uvicorn pillarcoach.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import coaching, health
from .config.settings import get_settings
from .core.coaching.persona import PERSONA_VERSION

# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=get_settings().log_level.upper(),
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and report missing configuration. The core holds no resources."""
    settings = get_settings()

    logger.info(
        "PillarCoach API starting",
        extra={
            "version": settings.api_version,
            "persona_version": PERSONA_VERSION,
        }
    )

    missing_fields = settings.validate_required_fields()
    if missing_fields:
        logger.error(
            "Missing required configuration",
            extra={"missing_fields": missing_fields}
        )

    yield

    logger.info("PillarCoach API shutting down")


def create_app() -> FastAPI:
    """Build the app from current settings. Tests override get_settings per client."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="""
        Coaching-model selection and prompt composition.

        ## Workflow

        1. **Select a model**: `POST /api/v1/coaching/select`
           - Send the user's text and optional pillar context
           - Receive the chosen coaching model, confidence and reasoning

        2. **Build prompts**: `POST /api/v1/coaching/prompts/conversational`
           or `POST /api/v1/coaching/prompts/actionables`
           - Receive instruction text to pass to your generation service

        ## Authentication

        All coaching endpoints require an API key in the `X-API-Key` header.
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )

    app.include_router(
        coaching.router,
        prefix="/api/v1/coaching",
        tags=["Coaching"],
    )

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint - points at docs."""
        return {
            "message": "PillarCoach API",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Log unhandled errors with request details; return a generic 500."""
        logger.error(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
            exc_info=exc,
        )

        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error while building coaching output."
            }
        )

    logger.info(
        "FastAPI application created",
        extra={
            "title": settings.api_title,
            "version": settings.api_version,
        }
    )

    return app


# Imported by uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "pillarcoach.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
