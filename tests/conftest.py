"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from tests.fakes import RUN_TARGET, FakeHost


@pytest.fixture
def fake_host():
    """Patch subprocess.run with a FakeHost for the duration of a test."""
    host = FakeHost()
    with patch(RUN_TARGET, side_effect=host.run):
        yield host
