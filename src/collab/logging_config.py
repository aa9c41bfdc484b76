"""Logging setup for the Collab API.

Application code logs through plain ``logging.getLogger(__name__)`` and passes
identifiers (project id, handle, user id) via ``extra=``. The formatter below
folds those extras, plus the per-request trace id and user name bound in
contextvars, into every rendered line.
"""

import logging
import sys

import structlog

# Loggers that are chatty at INFO and add nothing to request logs.
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Args:
        log_level: Root level name (debug/info/warning/error).
        json_output: JSON lines for deployed servers, colored console locally.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.ExtraAdder(),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_request_context(trace_id: str, user_name: str | None = None) -> None:
    """Attach the trace id (and the caller, once known) to later log lines."""
    ctx = {"trace_id": trace_id}
    if user_name:
        ctx["user_name"] = user_name
    structlog.contextvars.bind_contextvars(**ctx)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
