"""Structured logging configuration for Pingdom Exporter"""
import logging
import sys
from typing import Any, Dict
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer


def setup_structured_logging(config) -> None:
    """Setup structured logging, JSON by default and console output on request"""

    # Configure processors
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.log_format == "console":
        processors.append(ConsoleRenderer())
    else:
        processors.append(JSONRenderer())

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, config.log_level.upper())

    # Console handler
    handlers = [logging.StreamHandler(sys.stdout)]

    # File handler
    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(config.log_file)))

    for handler in handlers:
        handler.setLevel(level)

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True
    )

    # Set specific logger levels to reduce noise
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def log_scrape(logger: structlog.stdlib.BoundLogger, checks_count: int, samples_count: int, scrape_time: float) -> None:
    """Log a completed scrape with structured data"""
    logger.debug(
        "Pingdom scrape completed",
        checks_count=checks_count,
        samples_count=samples_count,
        scrape_time_seconds=round(scrape_time, 3),
        event_type="pingdom_scrape"
    )


def log_server_startup(logger: structlog.stdlib.BoundLogger, config) -> None:
    """Log server startup with configuration details"""
    logger.info(
        "Starting " + config.service_name,
        service_name=config.service_name,
        service_version=config.service_version,
        python_version=sys.version.split()[0],
        listen_address=config.listen_address,
        metrics_path=config.metrics_path,
        pingdom_base_url=config.pingdom_base_url,
        event_type="server_startup"
    )


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Dict[str, Any] = None) -> None:
    """Log error with structured context"""
    logger.error(
        "Error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="error",
        exc_info=True
    )
