"""Shared test fixtures for tagtree.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable

import pytest


class FailingSink:
    """Binary sink that raises ``OSError`` on its ``fail_on``-th write.

    Every call to ``write`` is counted, including the failing one and any
    made after it.  Bytes from successful writes are kept in ``data``.
    """

    def __init__(self, fail_on: int) -> None:
        self.fail_on = fail_on
        self.calls = 0
        self.data = b""
        self.error = OSError("don't want to write")

    def write(self, data: bytes) -> int:
        self.calls += 1
        if self.calls >= self.fail_on:
            raise self.error
        self.data += data
        return len(data)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "tagtree"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def failing_sink() -> Callable[[int], FailingSink]:
    """Return a factory for sinks failing on the given write number."""
    return FailingSink
