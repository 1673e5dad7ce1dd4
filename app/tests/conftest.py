import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection
# regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.logging import clear_activation_context  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_logging_context():
    """Prevent activation context leaking between tests."""
    yield
    clear_activation_context()
