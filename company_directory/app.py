"""
Main FastAPI application for the company directory.

This file wires together all layers:
- Domain: Entities, merge rules, operation results
- Repositories: Entity stores, retry executor, business rules
- Services: Info mapping and result normalization
- Routers: HTTP endpoints
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Tuple

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from . import __version__
from .config import Settings, settings
from .database import create_db_engine, create_session_factory, init_db
from .dependencies import set_services
from .domain.entities import Company, Employee
from .logging_config import setup_logging
from .metrics import metrics_endpoint, track_request_metrics
from .models import CompanyRecord, EmployeeRecord
from .repositories.company_repository import CompanyRepository
from .repositories.employee_repository import EmployeeRepository
from .repositories.retry import RetryExecutor
from .repositories.store import SqlAlchemyStore
from .routers import company_router, employee_router
from .services.company_service import CompanyService
from .services.employee_service import EmployeeService

setup_logging(
    log_level=settings.LOG_LEVEL,
    service_name=settings.SERVICE_NAME,
    use_json=settings.LOG_JSON,
)

logger = structlog.get_logger(__name__)


def create_services(
    session_factory: sessionmaker[Session], config: Settings = settings
) -> Tuple[CompanyService, EmployeeService]:
    """
    Create company and employee services with all dependencies.

    Args:
        session_factory: SQLAlchemy session factory for the stores
        config: Settings providing the retry policy

    Returns:
        Tuple of (company service, employee service)
    """
    retry_executor = RetryExecutor(
        max_retries=config.RETRY_MAX_ATTEMPTS,
        base_delay_seconds=config.RETRY_BASE_DELAY_SECONDS,
        max_delay_seconds=config.RETRY_MAX_DELAY_SECONDS,
    )

    company_repository = CompanyRepository(
        SqlAlchemyStore(session_factory, CompanyRecord, Company), retry_executor
    )
    employee_repository = EmployeeRepository(
        SqlAlchemyStore(session_factory, EmployeeRecord, Employee), retry_executor
    )

    return CompanyService(company_repository), EmployeeService(employee_repository)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Company Directory Service", version=__version__)

    engine = create_db_engine(settings.DATABASE_URL, settings.DB_POOL_PRE_PING)
    try:
        init_db(engine)
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    set_services(*create_services(create_session_factory(engine)))
    logger.info("Company Directory Service started")

    yield

    logger.info("Shutting down Company Directory Service")
    set_services(None, None)
    engine.dispose()
    logger.info("Company Directory Service stopped")


app = FastAPI(
    title="Company Directory Service",
    description="Manage company and employee records",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Bind a request ID into the log context and echo it back."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()
    response.headers["X-Request-ID"] = request_id
    return response


@app.middleware("http")
async def track_metrics(request: Request, call_next):
    """Track Prometheus request metrics."""
    start_time = time.time()
    # Unhandled exceptions become 500 responses in the global handler
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        route = request.scope.get("route")
        endpoint = getattr(route, "path", request.url.path)
        track_request_metrics(
            request.method, endpoint, status_code, time.time() - start_time
        )


app.include_router(company_router.router)
app.include_router(employee_router.router)


@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "version": __version__,
    }


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_server_error",
            "message": f"An error occurred: {exc}",
            "request_id": request.headers.get("X-Request-ID"),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "company_directory.app:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
