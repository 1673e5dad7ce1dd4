"""Activation context binding for structured logging.

Binds the language and generation of the activation being processed so
that every log entry emitted while it runs can be correlated, including
entries from the loader and the URL synchronizer.

Usage:
    from infrastructure.logging import bind_activation_context

    with bind_activation_context(language="it", generation=3):
        logger.info("locale_loaded")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_activation_context(
    language: str,
    generation: Optional[int] = None,
    activation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind activation-scoped context to all logs within the block.

    Args:
        language: Language being activated.
        generation: Generation token of the activation, if one was taken.
        activation_id: Unique id for the activation. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {
        "activation_id": activation_id or str(uuid.uuid4()),
        "language": language,
    }
    if generation is not None:
        context["generation"] = generation
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_activation_id() -> Optional[str]:
    """Get the current activation id from the logging context."""
    return structlog.contextvars.get_contextvars().get("activation_id")


def clear_activation_context() -> None:
    """Clear all activation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
