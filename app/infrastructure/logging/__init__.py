"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the site shell using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_activation_context(): Context manager for activation-scoped logging
    - get_activation_id(): Get current activation id from context
    - clear_activation_context(): Clear all activation context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_activation_context,
    get_activation_id,
    clear_activation_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    truncate_large_values,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_activation_context",
    "get_activation_id",
    "clear_activation_context",
    # Formatters
    "add_app_info",
    "truncate_large_values",
]
