import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for CI environments where
# Python might not automatically include it (e.g., some GitHub
# Actions runners invoking pytest differently).
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from yaks_config.utils.logging import shutdown_logging


@pytest.fixture(autouse=True)
def _detach_console_logging():
    """Drop any console handler a test installed so later tests don't write to a closed stream."""
    yield
    shutdown_logging()


@pytest.fixture
def config_dir(tmp_path):
    """A test directory holding a yaks-config.yaml that disables recursion."""
    (tmp_path / "yaks-config.yaml").write_text(
        "config:\n  recursive: false\n  name: from-dir\n", encoding="utf-8"
    )
    return tmp_path
