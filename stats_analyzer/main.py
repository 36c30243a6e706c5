import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from stats_analyzer import config
from stats_analyzer.api import health, statistics
from stats_analyzer.observability.metrics import MetricsMiddleware, metrics_router, record_rejected_input
from stats_analyzer.observability.logging import setup_logging
from stats_analyzer.services.errors import StatisticsInputError
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

# Lifespan handler: app.state.ready is True between startup and shutdown
@asynccontextmanager
async def app_lifespan(app: FastAPI):
    app.state.ready = True
    logger.info("%s %s ready", config.APP_TITLE, config.APP_VERSION)
    yield
    app.state.ready = False

# Factory function to create the FastAPI app
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=config.APP_TITLE,
        version=config.APP_VERSION,
        lifespan=app_lifespan,
    )
    app.add_middleware(MetricsMiddleware)  # Prometheus request metrics
    app.include_router(metrics_router)     # /metrics
    app.include_router(health.router)      # /health and /ready
    app.include_router(statistics.router)  # /summary and /statistics/{operation}
    app.state.ready = False  # flipped by app_lifespan

    # Malformed request bodies and unknown operations: always 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Error entries may embed exception objects (ctx), which are not JSON serializable
        def serialize_error(err):
            if isinstance(err, Exception):
                return str(err)
            if isinstance(err, dict):
                return {k: serialize_error(v) for k, v in err.items()}
            if isinstance(err, list):
                return [serialize_error(e) for e in err]
            return err
        return JSONResponse(
            status_code=400,
            content={"detail": serialize_error(exc.errors())},
        )

    # Data sets the statistics validator refused: 400 with the failure kind
    @app.exception_handler(StatisticsInputError)
    async def statistics_input_exception_handler(request: Request, exc: StatisticsInputError):
        logger.warning("Rejected data set on %s: %s %s", request.url.path, exc.kind, exc.details)
        record_rejected_input(exc.kind)
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "error": exc.kind},
        )

    return app

# Create the FastAPI app instance
app = create_app()
