# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# .env is loaded once, by skillmatch.config.
from skillmatch.config import get_settings
from skillmatch.api.routes.analyze import router as analyze_router
from skillmatch.api.routes.health import router as health_router
from skillmatch.services.analysis_service import ParseError, ValidationError


logger = logging.getLogger(__name__)


async def _parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "error": "parse_error"},
    )


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": "validation_error"},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    logging.getLogger("skillmatch").setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "startup app=%s version=%s required_skills=%s latency_ms=%s",
            settings.app_name,
            settings.version,
            ",".join(settings.required_skills),
            settings.simulated_latency_ms,
        )
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(ParseError, _parse_error_handler)
    application.add_exception_handler(ValidationError, _validation_error_handler)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)
    application.include_router(analyze_router, prefix=settings.api_prefix)
    return application


app = create_app()
