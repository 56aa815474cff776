# incant/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace

from incant.shared.config import settings


def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    This links the log to the distributed trace.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def configure_logging(log_format: Optional[str] = None, level: Optional[str] = None):
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).
    """
    log_format = log_format or settings.LOG_FORMAT
    level = (level or settings.LOG_LEVEL).upper()

    # 1. Define the chain of processors (Middleware for logs)
    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    # Logs go to stderr so CLI output on stdout stays machine-readable.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Uncached so a reconfigure rebinds the stream of existing loggers.
        cache_logger_on_first_use=False,
    )

    # 4. Standard library logging (Uvicorn, FastAPI) shares the level and stream.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
