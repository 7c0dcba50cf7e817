"""Structured logging with per-session context using structlog and contextvars."""

import logging
import sys
from contextvars import ContextVar

import structlog

# Context variable for the current agent session
current_session_id: ContextVar[str | None] = ContextVar("current_session_id", default=None)

_configured = False


def setup_structured_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog on top of stdlib logging, writing to stderr.

    Stdout is left to the event stream.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Render JSON lines instead of the console format
    """
    global _configured
    if _configured:
        return

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,  # Inject session context
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    _configured = True


def bind_session_context(session_id: str) -> None:
    """Bind session context for all subsequent logs in this async context."""
    current_session_id.set(session_id)
    structlog.contextvars.bind_contextvars(session_id=session_id)


def clear_session_context() -> None:
    """Clear session context after the session ends."""
    current_session_id.set(None)
    structlog.contextvars.unbind_contextvars("session_id")


def get_session_logger(name: str = "allrecipes_finder") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger carrying the session context.

    Before ``setup_structured_logging`` runs, the logger writes through stdlib
    logging (so host applications decide where it goes) instead of structlog's
    default stdout printer.
    """
    if _configured:
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def get_current_session_id() -> str | None:
    """Get the current session ID from context."""
    return current_session_id.get()
