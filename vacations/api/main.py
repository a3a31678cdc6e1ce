"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount auth and vacation routers under /v1
  - Expose health check endpoint

Collaborators:
  - RequestContextMiddleware: Request ID and logging context
  - auth_routes / vacation_routes
  - exception_handlers: RFC 7807 responses

Notes:
  - /v1 prefix allows API versioning
  - /healthz follows Kubernetes health check convention
  - Settings validation happens on first get_settings() (production JWT rules)
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..container import get_identity_provider, get_vacation_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from .auth_routes import router as auth_router
from .exception_handlers import register_exception_handlers
from .vacation_routes import router as vacation_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Builds in-memory adapters (and demo seed)."""
    settings = get_settings()
    get_identity_provider()
    get_vacation_repository()
    logger.info(
        "Vacations API starting up",
        extra={"app_env": settings.app_env, "dev_seed_demo": settings.dev_seed_demo},
    )
    yield
    logger.info("Vacations API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Vacations API", version="0.1.0", lifespan=lifespan)

    # R: Middleware order (bottom = first to execute): CORS -> RequestContext
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
    )

    app.include_router(auth_router, prefix="/v1")
    app.include_router(vacation_router, prefix="/v1")

    register_exception_handlers(app)

    @app.get("/healthz")
    def healthz(request: Request):
        return {
            "ok": True,
            "request_id": getattr(request.state, "request_id", None),
        }

    return app


app = create_app()
