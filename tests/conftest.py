import logging
from pathlib import Path

import pytest

EXPECTED_DIR = Path(__file__).parent / "expected"


def pytest_configure(config):
    config.addinivalue_line("markers", "property: property-based tests")


@pytest.fixture
def preserve_root_logger():
    """Restore root logger handlers and level after tests that call setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def expected_table() -> str:
    return (EXPECTED_DIR / "table.txt").read_text(encoding="utf-8")
