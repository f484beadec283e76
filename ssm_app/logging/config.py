"""
Centralized logging configuration for the stock market.

All components log through structlog on top of the standard library
``logging`` module, so output format and level are controlled in one place.
The ``logging`` section of the merged market configuration maps one to one
onto the keyword arguments of :func:`configure_logging`.
"""
import logging
import sys
from typing import Any, Mapping, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level name, case-insensitive (DEBUG, INFO, WARNING, ...)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include the time the record was written
        extra_processors: Additional structlog processors, run before rendering

    Raises:
        ValueError: If ``level`` is not a standard logging level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_market_logging(config: Mapping[str, Any]) -> None:
    """
    Configure logging from a merged market configuration.

    Args:
        config: Merged configuration, e.g. ``StockMarket.config``
    """
    configure_logging(**config["logging"])


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_market_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for market registration and trade decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound with the market subsystem context
    """
    return get_logger(name).bind(
        subsystem="market",
        audit_trail=True
    )


def log_market_decision(
    logger: FilteringBoundLogger,
    operation: str,
    accepted: bool,
    symbol: Optional[str],
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a registration or trade request.

    Args:
        logger: Structlog logger instance
        operation: Name of the market operation
        accepted: Whether the market accepted the request
        symbol: Security symbol the request refers to
        reason: Detailed reason for the decision
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        decision="ACCEPTED" if accepted else "REJECTED",
        symbol=symbol,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if accepted:
        bound_logger.info("Market request accepted")
    else:
        bound_logger.warning("Market request rejected")
