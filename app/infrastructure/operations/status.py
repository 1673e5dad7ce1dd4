"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
language activation.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Locale and content fragment applied
        PARTIAL: Locale applied, content fragment failed (slot cleared)
        DEFERRED: Shell not mounted yet, request kept as pending
        REJECTED: Language outside the supported set, nothing fetched
        FAILED: Locale could not be loaded, prior state untouched
        SUPERSEDED: A newer activation started, results discarded
    """

    SUCCESS = "success"
    PARTIAL = "partial"
    DEFERRED = "deferred"
    REJECTED = "rejected"
    FAILED = "failed"
    SUPERSEDED = "superseded"
