import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from .error import ServerError

logger = logging.getLogger(__name__)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.base_error.message},
    )


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import init_backend, shutdown_backend

    try:
        await init_backend()
    except Exception:
        logger.exception("DB init error")
        raise
    try:
        yield
    finally:
        await shutdown_backend()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Inventory API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import access_logs, equipments, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(equipments.router, prefix=ApplicationConfig.API_PREFIX, tags=["Equipment"])
    app.include_router(access_logs.router, prefix=ApplicationConfig.API_PREFIX, tags=["Access Logs"])

    app.add_exception_handler(ServerError, handle_server_error)

    # Mounted last so it never shadows the API routes
    static_dir = ApplicationConfig.STATIC_DIR
    if static_dir and os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app
