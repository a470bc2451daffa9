"""Shared fixtures for unit tests."""
from __future__ import annotations

import pytest

from modrinth_client.testing.fakes import FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
