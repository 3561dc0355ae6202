"""API middleware for Skeletonne."""

from skeletonne.api.middleware.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
