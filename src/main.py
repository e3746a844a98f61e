"""
FastAPI application entry point for the Event Reminder API.

This module:
- Configures the FastAPI application with middleware and routers
- Sets up structured logging with structlog
- Implements global exception handlers for consistent error envelopes
- Manages application lifecycle (table creation on startup)
- Configures CORS for the browser frontend
"""

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api.routes import event
from src.config import settings
from src.core.exceptions import ErrorCode, EventServiceError, StoreAccessError
from src.models.base import engine
from src.models.database import create_tables

APP_VERSION = "0.1.0"

# ===== Structured Logging Configuration =====

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),  # ISO 8601 timestamps
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        # JSON for production (machine-readable), Console for dev (human-readable)
        structlog.processors.JSONRenderer() if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ]
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for FastAPI application.

    Startup: log configuration and create missing tables.
    Shutdown: dispose of pooled store connections.
    """
    logger.info(
        "application_starting",
        service="Event Reminder API",
        version=APP_VERSION,
        environment=settings.app_env,
        log_level=settings.log_level,
        api_prefix=settings.api_prefix or "/",
        cors_origins=settings.cors_origins
    )
    create_tables()

    yield  # Application is running

    logger.info("application_shutting_down")
    engine.dispose()
    logger.info("shutdown_complete")


app = FastAPI(
    title="Event Reminder API",
    description="CRUD and paged listing for events with reminders",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ===== Middleware Configuration =====

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
    max_age=600,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log all incoming requests with timing information.

    Adds X-Process-Time header to response for debugging.
    """
    start_time = time.time()

    logger.info(
        "request_started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown",
    )

    response = await call_next(request)

    process_time = time.time() - start_time

    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    response.headers["X-Process-Time"] = str(round(process_time, 3))
    return response


# ===== Global Exception Handlers =====


@app.exception_handler(EventServiceError)
async def event_service_error_handler(request: Request, exc: EventServiceError):
    """
    Handle application errors with the standard error envelope.

    Response format:
    {
        "status": "error",
        "message": "Event with ID : 999 not found.",
        "data": {"error": "EVENT_001", "details": {"id": 999}}
    }
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "event_service_error",
        error_code=exc.error_code.value,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        path=request.url.path
    )

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Store failures that escaped the service layer."""
    error = StoreAccessError(operation=request.url.path)
    logger.error(
        "store_access_error",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Handle Pydantic validation errors (missing title, bad path id, ...).

    Response includes detailed validation errors for debugging.
    """
    logger.warning(
        "validation_error",
        errors=exc.errors(),
        body=str(exc.body)[:500],  # Truncate to avoid logging sensitive data
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "status": "error",
            "message": "Invalid request data",
            "data": {
                "error": ErrorCode.VALIDATION_ERROR.value,
                "details": jsonable_encoder(exc.errors()),
            },
        }
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unexpected exceptions.

    Logs full exception for debugging while returning a safe response.
    """
    logger.exception(
        "unexpected_error",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status": "error",
            "message": "An unexpected error occurred. Please try again later.",
            "data": {
                "error": ErrorCode.INTERNAL_ERROR.value,
                "reference_id": f"err_{int(time.time())}",
            },
        }
    )


# ===== Router Registration =====

app.include_router(event.router, prefix=settings.api_prefix)

# ===== Core Endpoints =====


@app.get("/health")
async def health():
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "environment": settings.app_env,
        "version": APP_VERSION,
        "timestamp": int(time.time())
    }
