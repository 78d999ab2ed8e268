"""Shared test fixtures for proclang.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "proclang"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def sample_source() -> str:
    """A small proclang program exercising every token kind."""
    return (
        "# greet the player\n"
        "proc greet(name) {\n"
        "    msg = \"hi, \" + name\n"
        "    if score >= 10.5 { say(r'\\o/') }\n"
        "    count += 1\n"
        "}\n"
    )
