"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog


@pytest.fixture
def bound_context():
    """Current structlog context variables, read after the test body runs."""
    return structlog.contextvars.get_contextvars
