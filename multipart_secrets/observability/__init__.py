"""
Observability module.

Provides logging configuration and safe structured-logging helpers.
"""

from multipart_secrets.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from multipart_secrets.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "safe_log_value",
    "log_with_context",
    "log_exception_with_context",
]
