"""Observability – logging setup shared by the whole package."""
from flagquery.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
