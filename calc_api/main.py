from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .models.constants import ENDPOINT_EXAMPLES
from .models.responses import ServiceInfo
from .routers import convert, tva, remise


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., development vs production error bodies).
    Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    if settings_override is not None:
        settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings

    # Middleware (request id / structured logging), CORS open to every origin
    app.middleware("http")(request_context_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.not_found_handler)
    app.add_exception_handler(errors.CalculationError, errors.calculation_error_handler)
    app.add_exception_handler(
        errors.MissingParametersError, errors.missing_parameters_handler
    )
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(convert.router)
    app.include_router(tva.router)
    app.include_router(remise.router)

    @app.get("/", response_model=ServiceInfo)
    async def root():
        return ServiceInfo(
            service=settings.app_name,
            version=settings.version,
            status="OK",
            endpoints=list(ENDPOINT_EXAMPLES),
        )

    return app


app = create_app()
