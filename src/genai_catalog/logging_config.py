"""structlog configuration."""

import logging

import structlog

from genai_catalog.config import CatalogSettings, get_catalog_settings


def configure_logging(settings: CatalogSettings | None = None) -> None:
    """Configure structlog for the process.

    Call once from the application entry point, before building the
    registry. The package itself never configures logging.

    Args:
        settings: Catalog settings. Defaults to the cached settings.
    """
    settings = settings or get_catalog_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
