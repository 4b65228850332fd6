"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from tassist.model.roster import Roster
from tests.unit.helpers import build_roster


@pytest.fixture
def roster() -> Roster:
    """Roster seeded with Alice, Benson and Carl, in that order."""
    return build_roster()


@pytest.fixture
def empty_roster() -> Roster:
    return Roster()
