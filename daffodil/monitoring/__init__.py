"""Monitoring package: structured logging."""
from .logging import add_app_context, get_logger, setup_logging

__all__ = ["add_app_context", "get_logger", "setup_logging"]
