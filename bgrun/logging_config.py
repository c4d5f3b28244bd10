"""
Logging configuration for bgrun.

structlog renders through the standard library logger so that third-party
log records and bgrun's own events end up on the same stream.
"""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """
    Configure structlog for human-readable console output on stderr.

    Args:
        verbose: Emit DEBUG events; otherwise only warnings and errors.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
