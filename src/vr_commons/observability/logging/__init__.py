"""Observability – structured logging helpers."""
from vr_commons.observability.logging.factory import JsonLoggerFactory
from vr_commons.observability.logging.processors import entity_log_context, get_logger

__all__ = ["JsonLoggerFactory", "entity_log_context", "get_logger"]
