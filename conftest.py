"""
Root conftest.py — registers custom markers.

Markers:
  @pytest.mark.slow   — exhaustive geometry sweeps; skipped with --skip-slow or SKIP_SLOW_TESTS=1
"""
from __future__ import annotations

import os

import pytest


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "slow: mark test as an exhaustive sweep (skip with --skip-slow or SKIP_SLOW_TESTS=1)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--skip-slow",
        action="store_true",
        default=False,
        help="Skip tests marked with @pytest.mark.slow",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.slow tests when --skip-slow or SKIP_SLOW_TESTS=1 is given."""
    skip = config.getoption("--skip-slow") or os.environ.get("SKIP_SLOW_TESTS", "").lower() in ("1", "true", "yes")
    if not skip:
        return
    skip_slow = pytest.mark.skip(reason="Slow sweep — skipped by --skip-slow or SKIP_SLOW_TESTS=1")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
