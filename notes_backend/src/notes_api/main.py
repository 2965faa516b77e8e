import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_api import __version__
from notes_api.config import Settings
from notes_api.database import build_engine, build_session_factory
from notes_api.errors import AppError, error_body
from notes_api.logging_config import setup_logging
from notes_api.models import Base
from notes_api.routes import auth as auth_routes
from notes_api.routes import notes as notes_routes
from notes_api.schemas import HealthResponse

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    engine = build_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    if settings.uses_default_secret:
        logger.warning("SECRET_KEY is not set; using the development default")
    if settings.seed_demo_data:
        from notes_api.seed import seed_demo_data

        with app.state.session_factory() as db:
            seed_demo_data(db, settings)
    logger.info("Notes API started")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Notes API stopped, database connections closed")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content=error_body(message, "VALIDATION_ERROR"))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), code),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body("Internal server error", "INTERNAL_ERROR"))


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application. The database engine is created at startup
    and disposed at shutdown by the lifespan handler.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Notes API",
        description="Notes application backend API with JWT auth and CRUD for personal notes.",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Health", "description": "Service health and status."},
            {"name": "Auth", "description": "User registration and authentication."},
            {"name": "Notes", "description": "CRUD operations for notes."},
        ],
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=3600,
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth_routes.router, prefix="/api")
    app.include_router(notes_routes.router, prefix="/api")

    # PUBLIC_INTERFACE
    @app.get("/api/health", response_model=HealthResponse, tags=["Health"], summary="Health Check")
    def health_check():
        """
        Health check endpoint.

        Returns:
            JSON object with service status and current UTC time.
        """
        return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc).isoformat())

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


app = create_app()


if __name__ == "__main__":
    run()
