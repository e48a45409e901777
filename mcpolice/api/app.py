import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mcpolice.api.routes import admin, mcp, statutes, stats, violations
from mcpolice.config import Settings, settings as default_settings
from mcpolice.errors import StoreError
from mcpolice.mcp.dispatcher import ToolCallDispatcher
from mcpolice.services.violations import ViolationService
from mcpolice.store import ViolationStore, get_store_backend

logger = logging.getLogger(__name__)


def create_app(
    service: ViolationService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        service: Violation service to serve. Built from the configured
            store backend when omitted.
        settings: Defaults to the environment-derived settings.
    """
    settings = settings or default_settings
    if service is None:
        service = ViolationService(ViolationStore(get_store_backend(settings)))

    app = FastAPI(
        title="MCPolice API",
        version=settings.SERVER_VERSION,
        description=settings.SERVER_DESCRIPTION,
    )
    app.state.violation_service = service
    app.state.dispatcher = ToolCallDispatcher(service, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-MCP-Version", "Accept"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request format",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Storage failure on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage backend unavailable"},
        )

    # Health check route
    @app.get("/health")
    def health_check():
        return {"status": "ok", "store": service.store.backend.get_info()}

    app.include_router(violations.router, prefix="/api/violations", tags=["violations"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])
    app.include_router(statutes.router, prefix="/api/statutes", tags=["statutes"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
    app.include_router(mcp.router, prefix="/mcp", tags=["mcp"])

    return app
