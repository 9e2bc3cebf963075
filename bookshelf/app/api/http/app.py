"""FastAPI application setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from bookshelf.app.api.http.app_data import ApplicationDependencies
from bookshelf.app.api.http.routers.accounts import router as accounts_router
from bookshelf.app.api.http.routers.health import router as health_router
from bookshelf.app.api.http.routers.service.book import router as book_router
from bookshelf.app.api.utils.app_startup import configure_logging
from bookshelf.app.core.errors import ServiceError, ValidationError
from bookshelf.app.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
)
from bookshelf.app.core.services.database import create_all
from bookshelf.app.runtime.config.config_template import validate_runtime_config
from bookshelf.app.runtime.context import get_config

# Load configuration
main_config = get_config()


# Initialize logging
configure_logging()


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return response


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title=main_config.app.name,
    version=main_config.app.version,
    lifespan=lifespan,
    docs_url=None if main_config.app.environment == "production" else "/docs",
    redoc_url=None if main_config.app.environment == "production" else "/redoc",
)

app.add_middleware(SecurityHeadersMiddleware)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
cors = main_config.app.cors
if "*" in cors.origins and cors.allow_credentials:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' origins with allow_credentials=True"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"msg": "Internal Server Error"},
                headers={"X-Request-ID": request_id},
            )


# --- Error translation ---
@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Service failure: {}", exc.message)
    else:
        logger.info(
            "Request rejected",
            status_code=exc.status_code,
            error_type=type(exc).__name__,
        )
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies are client errors like any other invalid input
    logger.bind(errors=exc.errors()).info("request.validation_error")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"msg": ValidationError.default_message},
    )


# --- Router registration ---
app.include_router(accounts_router)
app.include_router(book_router)
app.include_router(health_router)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    # Validate configuration so we fail fast on misconfiguration
    validate_runtime_config(config)

    database_service = DbSessionService()
    if not database_service.health_check():
        raise RuntimeError("Database connectivity check failed during startup")
    create_all(database_service.engine)

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        jwt_generation_service=JwtGeneratorService(),
        jwt_verify_service=JwtVerificationService(),
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


# --- Route handlers ---


@app.get("/")
async def root() -> dict[str, str]:
    """Service banner."""
    config = get_config()
    return {
        "message": f"{config.app.name} is running",
        "version": config.app.version,
    }


def main() -> None:
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.app.host,
        port=config.app.port,
        access_log=False,  # We handle access logging in middleware
    )


if __name__ == "__main__":
    main()
