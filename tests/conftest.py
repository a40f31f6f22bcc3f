"""Pytest configuration and shared fixtures for the targetgen test suite.

This module provides:
- Deterministic test environment setup
- Request factories for the common target families
- Resolved pages shared by the geometry and annotation tests
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest

from target_foundry.targetgen.catalog import CanonicalTarget, lookup
from target_foundry.targetgen.families import Family
from target_foundry.targetgen.paper import PageGeometry, resolve_page
from target_foundry.targetgen.spec import TargetRequest

# ---------------------------------------------------------------------------
# Environment Setup
# ---------------------------------------------------------------------------


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest environment for determinism."""
    deterministic_env = {
        "LC_ALL": "C",
        "LANG": "C",
        "TZ": "UTC",
        "PYTHONHASHSEED": "0",
    }
    for key, value in deterministic_env.items():
        os.environ.setdefault(key, value)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_request() -> Callable[..., TargetRequest]:
    """Factory building a TargetRequest from documented parameter names."""

    def _make(**params: Any) -> TargetRequest:
        return TargetRequest.model_validate(params)

    return _make


@pytest.fixture
def bullseye_request(make_request: Callable[..., TargetRequest]) -> TargetRequest:
    """1880 third-class bullseye on US Letter."""
    return make_request(Family="bullseye", Year=1880, Class=3, Paper="Letter")


@pytest.fixture
def letter_page() -> PageGeometry:
    return resolve_page("Letter")


@pytest.fixture
def bullseye_1880_3() -> CanonicalTarget:
    return lookup(Family.BULLSEYE, "1880-3")
