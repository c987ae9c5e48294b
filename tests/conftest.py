"""Shared test fixtures for declarations.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
module-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "declarations"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def expected_output() -> str:
    """Return the exact stdout of one walkthrough run."""
    return (
        "Employee(name=Lynn Smith, id=500)\n"
        "Your change is $\n"
        "The value of 10.99 divided by 20.0 is 0.5495\n"
        "The employee's id is 500\n"
    )
