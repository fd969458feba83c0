"""Structured logging configuration with structlog.

Library modules log through ``structlog.get_logger(__name__)`` and only emit
``debug`` events for completed steps. Failures are raised, never logged.

Usage:
    from eth_signature.logging import configure_logging

    configure_logging()  # reads SignatureConfig.from_env()
    configure_logging(SignatureConfig(log_level="DEBUG", log_format="json"))
"""

import structlog
from structlog.typing import Processor

from eth_signature.config import SignatureConfig, get_config


def configure_logging(config: SignatureConfig | None = None) -> None:
    """Configure structlog for applications embedding this package.

    Args:
        config: Settings to apply. Defaults to the environment-derived config.
    """
    config = config or get_config()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == "json":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(config.log_level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
