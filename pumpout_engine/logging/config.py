"""
Centralized logging configuration for the bulk-plan engine.

This module provides standardized logging configuration using structlog
for all components. The scheduling functions themselves never log; the
engine facade records every purchase and booking decision through the
helpers below so there is an audit trail of what a subscriber was told.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )
    # basicConfig leaves an already configured root logger untouched
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_booking_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for purchase and booking decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound with booking subsystem context
    """
    return get_logger(name).bind(
        subsystem="booking",
        audit_trail=True
    )


def log_booking_decision(
    logger: FilteringBoundLogger,
    check_name: str,
    passed: bool,
    subject: str,
    reason: Optional[str],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a purchase or booking check with standardized format.

    Args:
        logger: Structlog logger instance
        check_name: Name of the check (purchase_window, week_conflict, credits, ...)
        passed: Whether the check passed
        subject: Plan name or allocation being checked
        reason: Rejection reason code, None when passed
        context: Additional context data
    """
    bound_logger = logger.bind(
        check_name=check_name,
        check_result="PASS" if passed else "FAIL",
        subject=subject,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if passed:
        bound_logger.info("Booking check passed")
    else:
        bound_logger.warning("Booking check failed")


def log_plan_status(
    logger: FilteringBoundLogger,
    subject: str,
    status: str,
    remaining: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the derived status of an allocation.

    Args:
        logger: Structlog logger instance
        subject: Allocation being summarized
        status: Derived plan status value
        remaining: Credits left this season
        context: Additional context data
    """
    bound_logger = logger.bind(
        subject=subject,
        plan_status=status,
        remaining_pump_outs=remaining,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Plan status derived")
