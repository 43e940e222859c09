"""
Middleware module initialization.
"""
from ixaccounts.middleware.logging import (
    CorrelationIdMiddleware,
    RequestLoggingMiddleware,
    add_correlation_id_processor,
    configure_logging,
    get_correlation_id,
)

__all__ = [
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
    "add_correlation_id_processor",
    "configure_logging",
    "get_correlation_id",
]
