"""
Centralized logging configuration for the loadable package.

All logging in the package goes through structlog configured here, so
applications embedding it get consistent, structured records.
"""
import logging
import sys
from typing import Any, Optional, Union

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the application.

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


def configure_logging_from_config(
    config: Union[dict[str, Any], LoggingParams, None] = None,
    extra_processors: Optional[list] = None
) -> LoggingParams:
    """
    Configure logging from package configuration.

    Args:
        config: Merged configuration dict (see ConfigLoader.load), a
            LoggingParams instance, or None for the defaults
        extra_processors: Additional structlog processors to include

    Returns:
        The LoggingParams that were applied
    """
    if config is None:
        params = LoggingParams()
    elif isinstance(config, LoggingParams):
        params = config
    else:
        params = LoggingParams(**config.get("logging", {}))

    configure_logging(
        level=params.level,
        format_json=params.format_json,
        include_timestamp=params.include_timestamp,
        include_caller=params.include_caller,
        extra_processors=extra_processors,
    )
    return params


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for loadable cell transitions.

    Args:
        name: Logger name (typically __name__)
    """
    return get_logger(name).bind(
        subsystem="loadable_cell",
        audit_trail=True
    )


def log_status_transition(
    logger: FilteringBoundLogger,
    resource: str,
    from_status: str,
    to_status: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a status transition with standardized format.

    Args:
        logger: Structlog logger instance
        resource: Name of the resource whose status changed
        from_status: Status label before the transition
        to_status: Status label after the transition
        trigger: What applied the transition (begin, settle, apply)
        context: Additional context data
    """
    bound_logger = logger.bind(
        resource=resource,
        from_status=from_status,
        to_status=to_status,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("status_transition")
