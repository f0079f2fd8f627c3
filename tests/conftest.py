"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from bcnum.api.main import app
from bcnum.context import ScaleContext
from bcnum.engine import BcMath


@pytest.fixture
def ctx() -> ScaleContext:
    """A fresh context at scale 0."""
    return ScaleContext()


@pytest.fixture
def calc() -> BcMath:
    """A BcMath bound to its own context at scale 0."""
    return BcMath.with_scale(0)


@pytest.fixture
def client():
    """Create a test client for the API; clears dependency overrides afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()
