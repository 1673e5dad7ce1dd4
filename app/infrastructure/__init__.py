"""Infrastructure modules for the site shell.

Centralized infrastructure components:
- configuration: Settings management (settings, SiteShellSettings)
- logging: Structured logging (get_module_logger, bind_activation_context)
- clients: Resource fetchers (RequestsFetcher, DirectoryFetcher)
- i18n: Supported languages, locale bundles, loading and resolution
- operations: Operation results and statuses
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
]
