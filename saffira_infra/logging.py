"""
Logging configuration for CDK synthesis.

Structured JSON output through structlog, with the service name attached to
every event. Secrets are never passed to the logger; identifiers go through
``sanitize_for_logging`` first.
"""

import logging
import sys

import structlog


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging for the CDK app.

    Args:
        service_name: Name of the service for log context
        level: Standard library level name
    """
    # stderr keeps cdk synth output on stdout clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def sanitize_for_logging(value: str | None, visible_chars: int = 8) -> str:
    """Sanitize sensitive values for logging."""
    if not value:
        return ""
    if len(value) <= visible_chars:
        return value
    return value[:visible_chars] + "..."
