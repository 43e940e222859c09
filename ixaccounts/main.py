"""
FastAPI application entry point.

Configures the application with routes, middleware, and settings.
"""
import traceback

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ixaccounts.api.routes import accounts
from ixaccounts.config import get_settings
from ixaccounts.exceptions import IXAccountsError
from ixaccounts.ixbrl_engine import __version__
from ixaccounts.middleware.logging import (
    CorrelationIdMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)

settings = get_settings()

configure_logging(settings.log_level)

logger = structlog.get_logger(__name__)

app = FastAPI(
    title="IXAccounts API",
    description="""
## UK Statutory Accounts as Inline XBRL

IXAccounts turns structured company financial data into Companies House
ready iXBRL accounts.

### Key Features

- **Entity Size**: Micro, small, medium or large under the Companies Act thresholds
- **Validation**: Balance checks and mandatory content per size tier
- **Preview**: Human-readable rendering without tagging
- **Submission Package**: Deterministic ZIP archive with the tagged document

### Size Tiers

| Tier | Content |
|------|---------|
| Micro | Abridged profit and loss, FRS 105 |
| Small | Directors' remuneration, FRS 102 Section 1A |
| Medium | Cash flow statement, business review |
| Large | Strategic report, financial instruments |
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Accounts", "description": "Size classification, validation and iXBRL generation"},
        {"name": "Health", "description": "Health checks"},
    ],
)

# Order matters: correlation ID first
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CorrelationIdMiddleware)

app.include_router(accounts.router, prefix="/api/v1", tags=["Accounts"])


@app.exception_handler(IXAccountsError)
async def ixaccounts_exception_handler(request: Request, exc: IXAccountsError):
    """Handle all IXAccounts custom exceptions."""
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        "ixaccounts_error",
        error_code=exc.error_code,
        message=exc.message,
        details=exc.details,
        path=str(request.url.path),
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with consistent format."""
    logger.error(
        "unhandled_error",
        error_type=type(exc).__name__,
        message=str(exc),
        path=str(request.url.path),
        traceback=traceback.format_exc(),
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": True,
            "error_code": "IXA-999",
            "message": "An unexpected error occurred. Please try again.",
            "details": {"error_type": type(exc).__name__} if settings.debug else {},
        },
    )


@app.on_event("startup")
async def startup_event() -> None:
    """Log configuration on startup."""
    logger.info(
        "Starting IXAccounts API",
        debug=settings.debug,
        taxonomy_version=settings.taxonomy_version,
        default_currency=settings.default_currency,
    )


@app.on_event("shutdown")
async def shutdown_event() -> None:
    logger.info("Shutting down IXAccounts API")


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
