from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
from .middleware import RequestLoggingMiddleware
from src.adapter.database import build_engine, build_session_factory, create_tables
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning(f"Client error: {error.code} {error.message} ({request.url.path})")
    return JSONResponse(
        status_code=exc.status_code, content={"error": error.message, "code": error.code}
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "code": exc.base_error.code},
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        ctx = first.get("ctx") or {}
        message = str(ctx["error"]) if "error" in ctx else first.get("msg", message)
    logger.warning(f"Validation error: {message} ({request.url.path})")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "code": "VALIDATION_ERROR"},
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "code": "INTERNAL_ERROR"},
    )


def create_app(ApplicationConfig) -> FastAPI:
    engine = build_engine(ApplicationConfig.DB_URI)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            await create_tables(engine)
        logger.info("Application startup")
        yield
        await engine.dispose()
        logger.info("Application shutdown")

    app = FastAPI(title="Adaboards API", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import auth, board, health_check, member, task, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(board.router, prefix=prefix, tags=["Boards"])
    app.include_router(member.router, prefix=prefix, tags=["Members"])
    app.include_router(task.router, prefix=prefix, tags=["Tasks"])
    app.include_router(user.router, prefix=prefix, tags=["Users"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
