"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def legacy_record() -> str:
    """JSON record written by the legacy producer for A | B."""
    return '{"bits":3}'


@pytest.fixture
def newer_record() -> str:
    """JSON record with a bit (0x10) that the four-flag type does not name."""
    return '{"bits":19}'
