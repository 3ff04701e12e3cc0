"""Observability – structlog configuration and logger helpers."""
from mp_flags.observability.logging.factory import JsonLoggerFactory
from mp_flags.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
