"""
Observability module.

Provides structured logging, correlation ID tracking and HTTP middleware.
"""

from visualsuite.observability.logger import configure_logging

__all__ = ["configure_logging"]
