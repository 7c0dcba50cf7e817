"""Observability module for structured, session-scoped logging."""

from .logging import bind_session_context, clear_session_context, get_current_session_id, get_session_logger, setup_structured_logging

__all__ = [
    "bind_session_context",
    "clear_session_context",
    "get_current_session_id",
    "get_session_logger",
    "setup_structured_logging",
]
