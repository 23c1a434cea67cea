"""Observability – structured logging helpers."""
from flagquery.observability.logging.factory import JsonLoggerFactory
from flagquery.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
